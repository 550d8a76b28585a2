"""Fallback providers for resources declaring a stream capability

A resource opts in by declaring :class:`~ioshim.interfaces.IReadable` or
:class:`~ioshim.interfaces.IWritable`. Providers registered for the
resource's own class take precedence over these.
"""

from __future__ import annotations

from typing import IO, Any

from ioshim.interfaces import IReadable, IWritable
from ioshim.providers import StreamReader, StreamWriter


class StructuralReader(StreamReader):
    resource_type = IReadable

    def open_native(self, resource: Any, element_type: str) -> IO[Any]:
        return resource.get_input_stream()


class StructuralWriter(StreamWriter):
    resource_type = IWritable

    def open_native(self, resource: Any, element_type: str) -> IO[Any]:
        return resource.get_output_stream()
