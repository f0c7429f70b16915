"""
ACode Generation Boundary

Types and helpers shared with code generators. A generator turns a user
prompt (plus the file currently open in the editor) into a batch of
files; the session merges that batch into the workspace.

No generator backend ships with ACode. Anything implementing
``CodeGenerator`` can be handed to a session.

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, runtime_checkable

from acode.filesystem.merge import GeneratedFile


@dataclass(frozen=True)
class FileContext:
    """The active editor file, sent along with a prompt."""
    name: str
    content: str


@dataclass
class GenerationResult:
    """A generated batch and its summary."""
    files: List[GeneratedFile] = field(default_factory=list)
    description: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.files


@runtime_checkable
class CodeGenerator(Protocol):
    """Anything that can turn a prompt into files."""

    def generate_project(
        self,
        prompt: str,
        context: Optional[FileContext] = None
    ) -> GenerationResult:
        ...


def failed_generation(error: Any) -> GenerationResult:
    """Build the empty result reported when generation fails."""
    return GenerationResult(
        files=[],
        description=f"Failed to generate code. \n\nError: {error}",
    )


def build_generation_prompt(prompt: str, context: Optional[FileContext] = None) -> str:
    """
    Build the task text sent to a generator backend.

    Args:
        prompt: What the user asked for
        context: The file open in the editor, if any

    Returns:
        Prompt text
    """
    text = (
        f'TASK: Generate/Update code files based on: "{prompt}".\n'
        '\n'
        'MODE: Universal Code Generator (Web, Python, Go, C++, Rust, System, Game Dev).\n'
        '\n'
        'INSTRUCTIONS:\n'
        "1. Return a JSON object with a 'files' array and a 'description' string.\n"
        '2. If the user asks to UPDATE/FIX a file, return the FULL updated content '
        'of that file with the SAME path.\n'
        '3. If creating a new project, provide all necessary config files '
        '(e.g., package.json, go.mod, requirements.txt, Cargo.toml).\n'
    )

    if context is not None:
        text += (
            f'\nCONTEXT (Active File): The user is currently editing "{context.name}".\n'
            f'Content:\n{context.content}\n'
            "\nIf the request relates to this file, include it in the 'files' "
            'array with updated content.\n'
        )

    return text


def parse_generation_payload(text: str) -> GenerationResult:
    """
    Parse a generator's JSON reply.

    The payload is an object with a ``files`` array of
    ``{path, content, language?}`` objects and a ``description``.
    Anything else yields an empty batch whose description carries the
    error.

    Args:
        text: Raw JSON text

    Returns:
        GenerationResult
    """
    if not text:
        return failed_generation("No text returned from generator")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return failed_generation(e)

    if not isinstance(data, dict) or not isinstance(data.get('files'), list):
        return failed_generation("Payload must be an object with a 'files' array")

    files: List[GeneratedFile] = []
    for item in data['files']:
        if not isinstance(item, dict) or 'path' not in item or 'content' not in item:
            return failed_generation("Every file needs a 'path' and a 'content'")
        files.append(GeneratedFile.from_dict(item))

    return GenerationResult(files=files, description=str(data.get('description', '')))
