"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_clear: Callable[[], None] | None = None,
    on_settings: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_clear is not None:
        items.append(MenuItem("Clear Selection", lambda _icon, _item: on_clear()))
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    title = f"Range Picker – {date.today().strftime('%d.%m.%Y')}"
    return pystray.Icon("mini-range-picker", icon_image, title, menu)
