"""
Read-only guard that wraps every mutating method of a container.
Applied at class-creation time by ``recordkit.core.base.ContainerMeta``.
"""

from functools import wraps

from .errors import ReadOnlyViolation, report


def guarded(action: str):
    """Wrap a mutator so a read-only container reports a violation instead
    of running it. The wrapped call returns the error sink's result."""

    def decorator(fn):
        if getattr(fn, "__guarded__", None) is not None:
            return fn

        @wraps(fn)
        def inner(self, *args, **kwargs):
            if self.read_only:
                return report(ReadOnlyViolation(self, action))
            return fn(self, *args, **kwargs)

        inner.__guarded__ = action  # type: ignore[attr-defined]
        return inner

    return decorator
