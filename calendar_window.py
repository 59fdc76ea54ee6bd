"""Single-month range picker window (tkinter) positioned above the taskbar."""

from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import day_of_year
from picker import DatePicker, DayCell
from selection import DayTag
from settings import load_settings, save_settings

# Colours per palette: (light, dark)
_PALETTES = {
    False: {
        "bg": "white", "fg": "black", "header_bg": "#F3F3F3", "muted": "#555555",
        "accent": "#0078D4", "sel_bg": "#B3D7F2", "edge_bg": "#5AA5E0",
    },
    True: {
        "bg": "#202020", "fg": "#EEEEEE", "header_bg": "#2B2B2B", "muted": "#AAAAAA",
        "accent": "#3A96DD", "sel_bg": "#264F78", "edge_bg": "#3A7BC8",
    },
}


def cell_colors(cell: DayCell, palette: dict) -> tuple[str, str]:
    """Return (background, foreground) for a day cell's tags."""
    tags = cell.tags
    if DayTag.SELECTION_START in tags or DayTag.SELECTION_END in tags:
        return palette["edge_bg"], "white"
    if DayTag.SELECTION in tags:
        return palette["sel_bg"], palette["fg"]
    if DayTag.TODAY in tags:
        return palette["accent"], "white"
    return palette["bg"], palette["fg"]


class CalendarWindow:
    """Range picker for one month at a time."""

    def __init__(self, locale: str | None = None, anchor_month: date | None = None,
                 on_date_clicked=None) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(False, False)

        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.settings = load_settings()
        self._palette = _PALETTES[self.settings["dark_mode"]]
        self.root.configure(bg=self._palette["bg"])

        self._locale_override = locale
        self._on_date_clicked = on_date_clicked
        self.picker = self._make_picker(anchor_month)

        # Widget-to-date mapping (filled during _rebuild_grid)
        self._widget_dates: dict[int, date] = {}
        self._day_widgets: list[tk.Label] = []
        self._header_widgets: list[tk.Label] = []

        self._build_shell()
        self._rebuild_grid()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    def _make_picker(self, anchor_month: date | None) -> DatePicker:
        return DatePicker(
            locale=self._locale_override,
            anchor_month=anchor_month,
            weekday_labels=self.settings["weekday_labels"],
            on_date_clicked=self._on_date_clicked,
            settings=self.settings,
        )

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=10, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    @staticmethod
    def _title() -> str:
        return f"Range Picker  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + grid placeholder + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        p = self._palette
        self._outer = tk.Frame(self.root, bg=p["bg"])
        self._outer.pack(padx=6, pady=4)

        # Navigation row: Prev  <month year>  Next
        nav = tk.Frame(self._outer, bg=p["bg"])
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(
            nav, text=self.settings["prev_label"], font=self.font_nav,
            bg=p["bg"], fg=p["fg"], cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(
            nav, text=self.settings["next_label"], font=self.font_nav,
            bg=p["bg"], fg=p["fg"], cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        self._month_label = tk.Label(
            nav, font=self.font_header, bg=p["header_bg"], fg=p["fg"],
            cursor="hand2",
        )
        self._month_label.pack(side="left", expand=True, fill="x", padx=6)
        self._month_label.bind("<Button-1>", lambda _e: self._go_today())

        self._grid_frame = tk.Frame(self._outer, bg=p["bg"])
        self._grid_frame.pack()

        self._footer_label = tk.Label(
            self._outer, font=self.font_footer, bg=p["bg"], fg=p["muted"],
        )
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Grid: rebuilt on month change, recoloured on selection change
    # ------------------------------------------------------------------
    def _rebuild_grid(self) -> None:
        p = self._palette
        for w in self._header_widgets + self._day_widgets:
            w.destroy()
        self._header_widgets.clear()
        self._day_widgets.clear()
        self._widget_dates.clear()

        self._month_label.configure(text=self.picker.month_label)

        for col, abbr in enumerate(self.picker.header_labels):
            lbl = tk.Label(
                self._grid_frame, text=abbr, font=self.font_bold,
                bg=p["bg"], fg=p["muted"], width=4,
            )
            lbl.grid(row=0, column=col)
            self._header_widgets.append(lbl)

        row, last_col = 1, 0
        for cell in self.picker.cells():
            # a column at or left of the previous one starts a new row
            if cell.column <= last_col:
                row += 1
            last_col = cell.column
            lbl = tk.Label(
                self._grid_frame, text=str(cell.day), font=self.font_normal,
                width=4, cursor="hand2",
            )
            lbl.grid(row=row, column=cell.column - 1, padx=1, pady=1)
            lbl.bind("<Button-1>", self._on_click)
            lbl.bind("<Enter>", self._on_cell_enter)
            lbl.bind("<Leave>", self._on_cell_leave)
            self._widget_dates[id(lbl)] = cell.date
            self._day_widgets.append(lbl)

        self._update_highlight()

    def _update_highlight(self) -> None:
        for lbl, cell in zip(self._day_widgets, self.picker.cells()):
            bg, fg = cell_colors(cell, self._palette)
            font = self.font_bold if DayTag.TODAY in cell.tags else self.font_normal
            lbl.configure(bg=bg, fg=fg, font=font)
        self._footer_label.configure(text=self.picker.selection_summary())

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def _on_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self.picker.click(d)
            self._update_highlight()

    def _on_cell_enter(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self.picker.hover_enter(d)
            self._update_highlight()

    def _on_cell_leave(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self.picker.hover_leave(d)
            self._update_highlight()

    # ------------------------------------------------------------------
    # ESC clears selection first, then hides
    # ------------------------------------------------------------------
    def _on_escape(self, _event: tk.Event) -> None:
        if self.picker.selection.start is not None:
            self.clear_selection()
        else:
            self.hide()

    def clear_selection(self) -> None:
        self.picker.clear_selection()
        self._update_highlight()

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        tk.Label(frame, text="Locale (e.g. en-US):", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        locale_entry = tk.Entry(frame, width=12, font=self.font_normal)
        locale_entry.insert(0, self.settings["locale"] or "")
        locale_entry.grid(row=0, column=1, padx=(8, 0), pady=4)

        dark_var = tk.BooleanVar(value=self.settings["dark_mode"])
        tk.Checkbutton(
            frame, text="Dark mode (applies on restart)", variable=dark_var,
            font=self.font_normal,
        ).grid(row=1, column=0, columnspan=2, sticky="w", pady=4)

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=2, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            settings = load_settings()
            settings["locale"] = locale_entry.get().strip() or None
            settings["dark_mode"] = dark_var.get()
            save_settings(settings)
            self.settings = settings

            month = self.picker.month
            self.picker = self._make_picker(month)
            dlg.destroy()
            self._rebuild_grid()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        self.picker.navigate(direction)
        self._rebuild_grid()

    def _go_today(self) -> None:
        self.picker.go_today()
        self._rebuild_grid()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.title(self._title())
        self._rebuild_grid()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        # leave room for a bottom taskbar
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
