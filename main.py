"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import argparse
import logging
import threading
from datetime import date

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def _parse_month(value: str) -> date:
    try:
        y, m = value.split("-")
        return date(int(y), int(m), 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Month-grid date range picker")
    ap.add_argument("--locale", help="locale tag such as en-US (default: settings, then environment)")
    ap.add_argument("--month", type=_parse_month, help="month to open, YYYY-MM (default: current)")
    ap.add_argument("--no-tray", action="store_true", help="open the window directly, without a tray icon")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    def on_date_clicked(d: date) -> None:
        logger.info("Date clicked: %s", d.isoformat())

    cal_win = CalendarWindow(locale=args.locale, anchor_month=args.month,
                             on_date_clicked=on_date_clicked)

    if args.no_tray:
        cal_win.root.protocol("WM_DELETE_WINDOW", cal_win.root.destroy)
        cal_win.show()
        cal_win.root.mainloop()
        return 0

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_clear() -> None:
        cal_win.root.after(0, cal_win.clear_selection)

    def on_settings() -> None:
        cal_win.root.after(0, cal_win.open_settings)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit,
                       on_clear=on_clear, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    cal_win.root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
