"""Import listener definitions from Python source files.

A listener file defines Listener instances at module level, Listener
subclasses that can be built without arguments, or both. Classes that
already have an instance in the same module are not instantiated again.
Listeners imported from another module are left to that module.
"""

import hashlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType

from ..domain.exceptions import ListenerLoadError
from .listener import Listener

MODULE_PREFIX = "earshot_listeners"


def module_name_for(filepath: str) -> str:
    """Stable, unique module name for a listener file."""
    digest = hashlib.sha1(filepath.encode("utf-8")).hexdigest()[:12]
    stem = Path(filepath).stem.replace("-", "_").replace(".", "_")
    return f"{MODULE_PREFIX}_{stem}_{digest}"


def import_listener_file(filepath: str) -> ModuleType:
    """Execute a listener file as a fresh module.

    Re-importing the same path replaces the previous module in sys.modules,
    which is what reloading relies on.

    Raises:
        ListenerLoadError: If the file is missing or raises while importing.
    """
    path = Path(filepath)
    if not path.is_file():
        raise ListenerLoadError(filepath, "file does not exist")

    name = module_name_for(filepath)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ListenerLoadError(filepath, "not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(name, None)
        raise ListenerLoadError(filepath, f"{type(e).__name__}: {e}") from e
    return module


def _imported_from_elsewhere(listener: Listener, module: ModuleType) -> bool:
    """Whether an instance lives in another module, the one defining its exec.

    A file that imports another file's listener gets a reference to it, not
    a listener of its own.
    """
    callback = getattr(listener.exec, "__func__", listener.exec)
    origin = sys.modules.get(getattr(callback, "__module__", None) or "")
    if origin is None or origin is module:
        return False
    return any(value is listener for value in vars(origin).values())


def collect_listeners(module: ModuleType, filepath: str) -> list[Listener]:
    """Find the listeners a module defines, building subclasses as needed."""
    instances = [
        obj
        for obj in vars(module).values()
        if isinstance(obj, Listener) and not _imported_from_elsewhere(obj, module)
    ]
    instance_types = {type(obj) for obj in instances}

    listeners = list(instances)
    for obj in vars(module).values():
        if not (isinstance(obj, type) and issubclass(obj, Listener)):
            continue
        if obj is Listener or obj.__module__ != module.__name__:
            continue
        if obj in instance_types or inspect.isabstract(obj):
            continue
        try:
            listeners.append(obj())
        except Exception as e:
            raise ListenerLoadError(
                filepath, f"cannot instantiate {obj.__name__}: {e}"
            ) from e
    return listeners


def discover_listener_files(directory: Path) -> list[Path]:
    """All listener files under a directory, skipping private ones."""
    return sorted(
        path
        for path in directory.rglob("*.py")
        if not any(part.startswith("_") for part in path.relative_to(directory).parts)
    )
