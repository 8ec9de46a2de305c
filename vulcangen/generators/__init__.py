"""vulcangen generators -- one class per CLI command.

All generators share the lifecycle in :class:`BaseGenerator`: guards run in
``initializing``, and every later phase is skipped once an error is
registered.
"""

from vulcangen.generators.app import AppGenerator
from vulcangen.generators.base import BaseGenerator
from vulcangen.generators.listing import ListGenerator
from vulcangen.generators.module import ModuleGenerator
from vulcangen.generators.package import PackageGenerator
from vulcangen.generators.remove import RemoveGenerator

__all__ = [
    "AppGenerator",
    "BaseGenerator",
    "ListGenerator",
    "ModuleGenerator",
    "PackageGenerator",
    "RemoveGenerator",
]
