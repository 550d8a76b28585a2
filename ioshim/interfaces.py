from zope.interface import Attribute, Interface


class IErrorStrategy(Interface):
    def run(operation, *args, category=None, **kwargs):
        """Call ``operation(*args, **kwargs)`` once and report its outcome
        following the strategy's convention. Only failures that are
        instances of ``category`` are the strategy's business; anything else
        must propagate."""


class IStreamProvider(Interface):
    resource_type = Attribute("Class or interface of the resources handled")
    direction = Attribute("The ioshim.streams.Direction served")
    element_types = Attribute("Element type tags the provider can produce")
    preferred = Attribute(
        "Element type used when the caller does not name one, or None"
    )
    do_not_close = Attribute(
        "True if handles must not release the native stream when closed"
    )

    def open(resource, element_type):
        """Open the native stream for ``resource`` and return a handle over
        elements of ``element_type``. Raise
        :exc:`~ioshim.exceptions.ResourceUnavailable` if the native open
        fails."""


class IStreamReader(IStreamProvider):
    """Provider of Input handles"""


class IStreamWriter(IStreamProvider):
    """Provider of Output handles truncating the resource"""


class IStreamAppender(IStreamProvider):
    """Provider of Output handles appending to the resource"""


class IInput(Interface):
    closed = Attribute("True once the handle released its stream")

    def read():
        """Return the next element, or None at the end of the stream"""

    def read_block(size=-1):
        """Return up to ``size`` elements as a block (all if negative)"""

    def close():
        """Release the native stream. Calling it again does nothing"""


class IOutput(Interface):
    closed = Attribute("True once the handle released its stream")

    def write(element):
        """Write a single element"""

    def write_block(block):
        """Write a block of elements"""

    def flush():
        """Push buffered elements to the native stream"""

    def close():
        """Flush and release the native stream. Calling it again does nothing"""


class IReadable(Interface):
    """Capability of resources that hand out their own input stream"""

    def get_input_stream():
        """Return a binary file-like object open for reading"""


class IWritable(Interface):
    """Capability of resources that hand out their own output stream"""

    def get_output_stream():
        """Return a binary file-like object open for writing"""
