from .step_10_system_update import SystemUpdateStep
from .step_20_remove_telemetry import RemoveTelemetryStep
from .step_30_shell_setup import ShellSetupStep
from .step_40_desktop_setup import DesktopSetupStep
from .step_50_docker_kali import DockerKaliStep
from .step_60_xhost_unit import XhostUnitStep
from .step_70_kali_wrapper import KaliWrapperStep
from .step_80_kali_tools import KaliToolsStep

__all__ = [
    "SystemUpdateStep",
    "RemoveTelemetryStep",
    "ShellSetupStep",
    "DesktopSetupStep",
    "DockerKaliStep",
    "XhostUnitStep",
    "KaliWrapperStep",
    "KaliToolsStep",
]
