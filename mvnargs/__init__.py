__all__ = (
    "ArgsBuilder",
    "OPTIONS",
    "Option",
    "OptionKind",
    "OrderedSet",
    "__version__",
    "__version_info__",
    "render",
)


from ._version import __version__, __version_info__
from .builder import ArgsBuilder
from .options import OPTIONS, Option, OptionKind, render
from .ordered import OrderedSet
