"""Tool input models — parsed from the model's raw JSON and reflected into schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from code_agent.tools.domain.errors import ToolExecutionError


class ReadFileInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field(
        description="The relative path of a file in the working directory."
    )


class ListFilesInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field(
        default="",
        description="The relative path of a directory in the working directory.",
    )


class EditFileInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = Field(
        description="The relative path of a file in the working directory."
    )
    old_str: str = Field(description="The string to be replaced.")
    new_str: str = Field(description="The string to replace with.")


def input_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Reflect an input model into the object schema advertised to the model.

    Pydantic's per-field ``title`` keys are dropped; only type, description and
    default survive, alongside the list of required fields.
    """
    schema = model.model_json_schema()
    properties = {
        name: {key: value for key, value in prop.items() if key != "title"}
        for name, prop in schema.get("properties", {}).items()
    }
    return {
        "type": "object",
        "properties": properties,
        "required": list(schema.get("required", [])),
        "additionalProperties": False,
    }


def parse_input[T: BaseModel](model: type[T], tool_name: str, raw: str) -> T:
    """Validate the model's raw JSON arguments into a typed input.

    An empty payload is treated as an empty object so that tools whose fields
    are all optional can be called without arguments.

    Raises:
        ToolExecutionError: if raw is not valid JSON or violates the schema.
    """
    payload = raw if raw.strip() else "{}"
    try:
        return model.model_validate_json(payload)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'input'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ToolExecutionError(
            f"failed to parse {tool_name} input: {details}"
        ) from exc
