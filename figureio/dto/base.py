from pydantic import BaseModel, ConfigDict


def _snake_to_pascal(name: str) -> str:
    return "".join(x.title() for x in name.split("_"))


class BaseInfo(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        alias_generator=_snake_to_pascal,
        serialize_by_alias=True,
        # Infinity/NaN in JSON output, not null
        ser_json_inf_nan="constants",
    )
