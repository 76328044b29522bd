"""Output styles for listing results."""

from typing import Callable, Iterable, TextIO

from pydantic import TypeAdapter

from blob_tools.core.exceptions import ValidationError

from .models import RemoteObjectSummary

Renderer = Callable[[Iterable[RemoteObjectSummary], TextIO], int]

_summary_adapter = TypeAdapter(RemoteObjectSummary)


def render_text(summaries: Iterable[RemoteObjectSummary], stream: TextIO) -> int:
    """Write one key per line. Returns the number of objects written."""
    count = 0
    for summary in summaries:
        stream.write(f"{summary.key}\n")
        count += 1
    return count


def render_json(summaries: Iterable[RemoteObjectSummary], stream: TextIO) -> int:
    """Write a JSON array of object summaries. Returns the number written.

    Objects are written as they are pulled, so large listings are never held
    in memory. The first object is pulled before anything is written, so a
    listing that fails on its first request leaves the stream untouched.
    """
    iterator = iter(summaries)
    first = next(iterator, None)

    stream.write("[")
    count = 0
    if first is not None:
        stream.write(_summary_adapter.dump_json(first).decode("utf-8"))
        count = 1
        for summary in iterator:
            stream.write(",")
            stream.write(_summary_adapter.dump_json(summary).decode("utf-8"))
            count += 1
    stream.write("]\n")
    return count


_RENDERERS: dict[str, Renderer] = {
    "text": render_text,
    "json": render_json,
}


def get_renderer(name: str) -> Renderer:
    """Look up a renderer by name ('text' or 'json').

    Raises:
        ValidationError: If name is not a known output style
    """
    try:
        return _RENDERERS[name.lower()]
    except KeyError:
        raise ValidationError(
            f"Unknown output style: {name}. Must be one of: "
            f"{', '.join(sorted(_RENDERERS))}"
        )
