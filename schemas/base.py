from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def provided_fields(self) -> dict:
        """Fields the client actually sent with a value, keyed the way they are stored."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


def is_blank(value: str | None) -> bool:
    """Missing and whitespace-only strings both count as empty."""
    return value is None or not value.strip()
