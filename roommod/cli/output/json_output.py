"""JSON output mode utilities."""

import json
from typing import Any

from pydantic import BaseModel
from rich.console import Console


class CLIJSONEncoder(json.JSONEncoder):
    """JSON encoder that understands snapshot models."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, BaseModel):
            return obj.model_dump()
        return super().default(obj)


def json_output(console: Console, data: Any) -> None:
    """Print ``data`` as highlighted JSON."""
    console.print_json(json.dumps(data, cls=CLIJSONEncoder))
