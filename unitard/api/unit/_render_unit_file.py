"""Render the systemd unit file for a unit."""

from typing import TextIO

from ...templating import get_template, render_template
from .UnitDescriptor import UnitDescriptor
from .UnitError import RenderWriteFailed

# The only template shipped; loaded once at import
UNIT_TEMPLATE = get_template("basic.service")


def render_unit_text(descriptor: UnitDescriptor) -> str:
    """Return the unit file text for descriptor."""
    return render_template(
        UNIT_TEMPLATE,
        {
            "description": descriptor.name,
            "exec_start": str(descriptor.binary_path),
        },
    )


def render_unit_file(descriptor: UnitDescriptor, sink: TextIO) -> None:
    """Write the unit file text for descriptor into sink.

    Raises:
        RenderWriteFailed: If writing to sink fails, including when the sink
            cannot encode the binary path
    """
    text = render_unit_text(descriptor)
    try:
        sink.write(text)
        sink.flush()
    except (OSError, UnicodeError) as e:
        raise RenderWriteFailed(f"could not write unit file for '{descriptor.name}': {e}") from e
