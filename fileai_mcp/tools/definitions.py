from dataclasses import dataclass, field

UPLOAD_AND_PROCESS = "upload_and_process"
LIST_FILES = "list_files"
GET_FILE_DETAILS = "get_file_details"


@dataclass(frozen=True)
class ToolDefinition:
    """Name, description and JSON input schema of one exposed tool."""

    name: str
    description: str
    input_schema: dict[str, object] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=UPLOAD_AND_PROCESS,
        description="Upload a document to File.ai and get AI-extracted information",
        input_schema={
            "type": "object",
            "properties": {
                "filePath": {
                    "type": "string",
                    "description": "Path to the file to upload and process",
                },
            },
            "required": ["filePath"],
        },
    ),
    ToolDefinition(
        name=LIST_FILES,
        description="List all files in File.ai with their processing status and summaries",
    ),
    ToolDefinition(
        name=GET_FILE_DETAILS,
        description="Get detailed information about a specific processed file",
        input_schema={
            "type": "object",
            "properties": {
                "fileName": {
                    "type": "string",
                    "description": "Name of the file to get details for",
                },
            },
            "required": ["fileName"],
        },
    ),
)
