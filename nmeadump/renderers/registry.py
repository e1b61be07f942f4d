from types import MappingProxyType


class DispatchRegistry:
    """Read-only mapping from a type tag to its renderer.

    Renderers are called as ``renderer(obj, out)`` where ``out`` is a
    Reporter. A tag without a renderer is reported as not implemented and
    never raises.
    """

    def __init__(self, renderers, namer=str):
        self._renderers = MappingProxyType(dict(renderers))
        self._namer = namer

    def __contains__(self, tag):
        return tag in self._renderers

    def __len__(self):
        return len(self._renderers)

    def __iter__(self):
        return iter(self._renderers)

    def get(self, tag):
        return self._renderers.get(tag)

    def name_of(self, tag):
        return self._namer(tag)

    def dispatch(self, tag, obj, out, label=None):
        """Render obj. Returns False if no renderer is registered for tag."""
        renderer = self._renderers.get(tag)
        out.title(self.name_of(tag))
        if renderer is None:
            out.unimplemented(label or self.name_of(tag))
            return False
        renderer(obj, out)
        out.end()
        return True
