"""autodeploy: one-shot provisioning of an Ubuntu desktop.

Sections run in a fixed order:
- System update and telemetry removal
- Fish + Oh My Fish shell
- Sway desktop with dotfiles
- Docker with a long-running Kali container, X11 access and a `kali` wrapper

A failing command is logged and recorded; later sections still run unless
strict mode is on.
"""

__all__ = []
