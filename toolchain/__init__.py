"""
Build Toolchain Package
Compiler settings, solc compilation and the shared error types
"""

from .compiler_settings import CompilerSettings, load_compiler_settings
from .compiler import SolidityCompiler
from .errors import DeploymentFailed, CompilationError, NetworkError, DeploymentError

__all__ = [
    'CompilerSettings',
    'load_compiler_settings',
    'SolidityCompiler',
    'DeploymentFailed',
    'CompilationError',
    'NetworkError',
    'DeploymentError'
]
