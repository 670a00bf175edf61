from .core.constants import TOOL_VERSION
from .core.errors import TspError, PackageError, FileNotFound, FileWriteError
from .core.paths import isAbsolute, getModuleAbsolutePath, mkdirIfNotExist
from .config.patch_config import PatchConfig, loadPatchConfig
from .packages.locator import PackageDescriptor, resolvePackage, resolvePackageDir
from .packages.global_prefix import getGlobalPrefix, resolveGlobalPackageDir
from .modules.inspector import ModuleDescriptor, inspectModule

__version__ = TOOL_VERSION

__all__ = [
    "TOOL_VERSION",
    "TspError",
    "PackageError",
    "FileNotFound",
    "FileWriteError",
    "isAbsolute",
    "getModuleAbsolutePath",
    "mkdirIfNotExist",
    "PatchConfig",
    "loadPatchConfig",
    "PackageDescriptor",
    "resolvePackage",
    "resolvePackageDir",
    "getGlobalPrefix",
    "resolveGlobalPackageDir",
    "ModuleDescriptor",
    "inspectModule",
]
