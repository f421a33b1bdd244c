from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OMF_INSTALL_URL = "https://raw.githubusercontent.com/oh-my-fish/oh-my-fish/master/bin/install"
CHAIN_THEME_REPO = "https://github.com/KNG6/OhMyChainKNG"

DOTFILES_BASE_URL = "https://raw.githubusercontent.com/KNG6/sway-dotfile/refs/heads/main"
FONT_URL = (
    "https://github.com/ryanoasis/nerd-fonts/raw/refs/heads/master/"
    "patched-fonts/Terminus/TerminessNerdFont-Bold.ttf"
)
WALLPAPER_NAME = "08_Zoom_CP_Wallpapers_Template_1920x1080_56du2t8jbt4pleym.jpg"
WALLPAPER_URL = f"{DOTFILES_BASE_URL}/{WALLPAPER_NAME}"

KALI_IMAGE = "kalilinux/kali-rolling"
KALI_CONTAINER = "kali"
HOST_MOUNT = "/mnt/host"
X11_SOCKET = "/tmp/.X11-unix"
WRAPPER_PATH = "/usr/local/bin/kali"
FISH_PATH = "/usr/bin/fish"


@dataclass(frozen=True)
class HomePaths:
    """Per-user locations the provisioner writes to."""

    home: str

    def _p(self, rel: str) -> str:
        return str(Path(self.home) / rel)

    @property
    def omf_chain_theme(self) -> str:
        return self._p(".local/share/omf/themes/chain")

    @property
    def fish_config(self) -> str:
        return self._p(".config/fish/config.fish")

    @property
    def sway_dir(self) -> str:
        return self._p(".config/sway")

    @property
    def i3status_dir(self) -> str:
        return self._p(".config/i3status")

    @property
    def kitty_dir(self) -> str:
        return self._p(".config/kitty")

    @property
    def fonts_dir(self) -> str:
        return self._p(".local/share/fonts")

    @property
    def wallpaper_dir(self) -> str:
        return self._p("Images/wallpaper")

    @property
    def wallpaper(self) -> str:
        return str(Path(self.wallpaper_dir) / WALLPAPER_NAME)

    @property
    def systemd_user_dir(self) -> str:
        return self._p(".config/systemd/user")

    def dotfiles(self) -> list[tuple[str, str]]:
        """(url, destination) pairs for the Sway desktop dotfiles."""
        return [
            (f"{DOTFILES_BASE_URL}/sway/config", str(Path(self.sway_dir) / "config")),
            (f"{DOTFILES_BASE_URL}/i3status/config", str(Path(self.i3status_dir) / "config")),
            (f"{DOTFILES_BASE_URL}/kitty/kitty.conf", str(Path(self.kitty_dir) / "kitty.conf")),
        ]
