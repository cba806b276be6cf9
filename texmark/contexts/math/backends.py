"""
Math Backend Registry

Maps engine names to backends implementing the two-operation capability
interface (MathML and PNG rendering). Engines register themselves by name;
the renderer looks them up by the names found in the options.

Adding an engine:

    @register_engine("myengine")
    class MyEngine(MathBackend):
        capabilities = frozenset({Capability.MATHML})

        def __init__(self, options):
            ...

        def render_mathml(self, kind, source):
            ...
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Optional

from lxml import etree

from texmark.contexts.document.nodes import MathKind


class Capability(str, Enum):
    """Output a backend can produce."""

    MATHML = "mathml"
    PNG = "png"


@dataclass(frozen=True)
class RasterImage:
    """
    Rasterized math returned by a PNG backend.

    Attributes:
        src: Image URI (file URL or data URI)
        height: Pixels above the text baseline
        depth: Pixels below the text baseline
    """

    src: str
    height: int
    depth: int


class MathBackend(ABC):
    """
    Base class for math engines.

    Subclasses declare which capabilities they provide and override the
    matching render methods. Returning None means the engine declines to
    render that input; it is not an error.
    """

    capabilities: FrozenSet[Capability] = frozenset()

    def render_mathml(self, kind: MathKind, source: str) -> Optional[etree._Element]:
        return None

    def render_png(self, kind: MathKind, source: str) -> Optional[RasterImage]:
        return None


RenderCallable = Callable[[MathKind, str], Any]

# Engine name -> backend class, populated by @register_engine
ENGINE_FACTORIES: Dict[str, type] = {}


def register_engine(name: str):
    """Class decorator adding an engine to the set built by build_registry()."""

    def decorator(cls):
        ENGINE_FACTORIES[name] = cls
        return cls

    return decorator


class BackendRegistry:
    """
    Registry of named math backends.

    Lookup is a plain map access; a name without a backend for the requested
    capability yields None rather than an exception so callers decide how
    fatal that is.
    """

    def __init__(self):
        self._backends: Dict[str, MathBackend] = {}

    def register(self, name: str, backend: MathBackend) -> MathBackend:
        """
        Register a backend under an engine name, replacing any previous one.

        Args:
            name: Engine name as used in the options (e.g. 'latex2mathml')
            backend: Backend instance

        Returns:
            The registered backend
        """
        self._backends[name] = backend
        return backend

    def unregister(self, name: str) -> None:
        self._backends.pop(name, None)

    def get_backend(self, name: str) -> Optional[MathBackend]:
        return self._backends.get(name)

    def lookup(self, name: str, capability: Capability) -> Optional[RenderCallable]:
        """
        Get the render callable of an engine for one capability.

        Args:
            name: Engine name
            capability: Capability.MATHML or Capability.PNG

        Returns:
            Bound render method, or None if the engine is unknown or lacks the capability
        """
        backend = self._backends.get(name)
        if backend is None or capability not in backend.capabilities:
            return None

        operations = {
            Capability.MATHML: backend.render_mathml,
            Capability.PNG: backend.render_png,
        }
        return operations[capability]

    def names(self, capability: Optional[Capability] = None) -> List[str]:
        """List engine names, optionally only those providing a capability."""
        return [
            name
            for name, backend in self._backends.items()
            if capability is None or capability in backend.capabilities
        ]

    def __contains__(self, name: str) -> bool:
        return name in self._backends
