import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JsonBaseModel(BaseModel):
    """A Pydantic BaseModel binding and dumping deployer properties by their camelCase names."""

    def dump_json(self):
        return self.model_dump_json(indent=4, by_alias=True)

    def dump_yaml(self):
        return yaml.safe_dump(self.model_dump(mode="json", by_alias=True), indent=2, sort_keys=False)

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, alias_generator=to_camel)
