from .bus import SpyBus
from .installer import FakeInstaller, InstallCall
from .workspace import ProjectFactory

__all__ = ["SpyBus", "FakeInstaller", "InstallCall", "ProjectFactory"]
