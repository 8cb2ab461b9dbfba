"""
Core application components.

Import submodules directly (core.application, core.storage, ...);
only core.application and core.camera need an OpenGL context.
"""
