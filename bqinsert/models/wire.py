"""BQInsert — Base Model for Wire-Format Resources.

Every resource sent to the warehouse API uses lowerCamelCase keys, and
optional members are left out of the body entirely instead of being sent
as null.
"""

from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """camelCase resource whose ``omit_if_none`` fields vanish when unset."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    omit_if_none: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def drop_absent_members(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name in self.omit_if_none:
            if getattr(self, name) is not None:
                continue
            data.pop(name, None)
            alias = fields[name].alias
            if alias:
                data.pop(alias, None)
        return data
