"""Plugin output and the merge step a host pipeline applies to several outputs."""

from dataclasses import dataclass, field
from typing import Iterable, List, Union


@dataclass
class PluginOutput:
    """Import declarations to place at the top of the file, and the generated body."""

    prepend: List[str] = field(default_factory=list)
    content: str = ""

    def render(self) -> str:
        return merge_outputs([self])


def merge_outputs(outputs: Iterable[Union[PluginOutput, str]]) -> str:
    """
    Concatenate outputs into one file: every distinct prepend line once, in
    first-seen order, then a blank line, then the contents.
    """
    prepend: List[str] = []
    contents: List[str] = []
    for output in outputs:
        if isinstance(output, str):
            contents.append(output)
            continue
        prepend.extend(output.prepend)
        if output.content:
            contents.append(output.content)

    header = "\n".join(dict.fromkeys(prepend))
    body = "\n".join(contents)
    parts = [part for part in (header, body) if part]
    return "\n\n".join(parts) + "\n" if parts else ""
