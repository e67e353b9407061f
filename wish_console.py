#!/usr/bin/env python3
"""
Tkinter guestbook window for the wedding website API.

Features:
    * Loads the list of wishes on start, newest first.
    * "Leave Your Wish" form with name and message.
    * Delete a single wish, or reset the whole guestbook, after confirmation.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

import tkinter as tk
from tkinter import messagebox, ttk
from tkinter.scrolledtext import ScrolledText

from app.client import DEFAULT_BASE_URL, GuestbookState, WishApiClient, WishApiError


class GuestWishesWindow(tk.Tk):
    def __init__(self) -> None:
        super().__init__()
        self.title("Guest Wishes")
        self.minsize(640, 560)

        self.guestbook = GuestbookState(api=WishApiClient(DEFAULT_BASE_URL))
        self._form: tk.Toplevel | None = None

        self._build_ui()
        self.log(f"UI ready. Using API base URL: {self.guestbook.api.base_url}")
        self._refresh()

    # --- UI construction -------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.columnconfigure(0, weight=1)

        ttk.Label(header, text="Guest Wishes", font=("TkDefaultFont", 16, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        ttk.Button(
            header,
            text="Leave Your Wish",
            command=self._open_form,
        ).grid(row=0, column=1, padx=6)
        ttk.Button(
            header,
            text="Refresh",
            command=self._refresh,
            width=10,
        ).grid(row=0, column=2, padx=6)
        ttk.Button(
            header,
            text="Reset",
            command=self._on_reset,
            width=10,
        ).grid(row=0, column=3, padx=(6, 0))

        list_frame = ttk.LabelFrame(self, text="Wishes")
        list_frame.grid(row=1, column=0, sticky="nsew", padx=12, pady=6)
        list_frame.columnconfigure(0, weight=1)
        list_frame.rowconfigure(0, weight=1)

        canvas = tk.Canvas(list_frame, highlightthickness=0)
        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=canvas.yview)
        self.cards = ttk.Frame(canvas)
        self.cards.bind(
            "<Configure>",
            lambda _event: canvas.configure(scrollregion=canvas.bbox("all")),
        )
        canvas.create_window((0, 0), window=self.cards, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        canvas.grid(row=0, column=0, sticky="nsew")
        scrollbar.grid(row=0, column=1, sticky="ns")

        console_frame = ttk.LabelFrame(self, text="Console Output")
        console_frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=(6, 12))
        console_frame.columnconfigure(0, weight=1)

        self.output = ScrolledText(console_frame, wrap="word", height=6, state="disabled")
        self.output.grid(row=0, column=0, sticky="nsew", padx=6, pady=6)

    def _render_wishes(self) -> None:
        for child in self.cards.winfo_children():
            child.destroy()

        if not self.guestbook.wishes:
            ttk.Label(self.cards, text="Wishes will appear here").grid(
                row=0, column=0, padx=8, pady=12, sticky="w"
            )
            return

        for row, wish in enumerate(self.guestbook.wishes):
            card = ttk.Frame(self.cards, relief="groove", padding=8)
            card.grid(row=row, column=0, sticky="ew", padx=6, pady=4)
            card.columnconfigure(0, weight=1)

            ttk.Label(card, text=wish.name, font=("TkDefaultFont", 11, "bold")).grid(
                row=0, column=0, sticky="w"
            )
            ttk.Button(
                card,
                text="×",
                width=3,
                command=lambda wish_id=wish.id: self._on_delete(wish_id),
            ).grid(row=0, column=1, sticky="e")
            ttk.Label(card, text=wish.message, wraplength=520, justify="left").grid(
                row=1, column=0, columnspan=2, sticky="w", pady=(4, 0)
            )
            ttk.Label(card, text=wish.display_time(), foreground="gray").grid(
                row=2, column=0, columnspan=2, sticky="w"
            )

    def _open_form(self) -> None:
        if self._form is not None:
            self._form.lift()
            return

        self.guestbook.open_form()
        form = tk.Toplevel(self)
        form.title("Leave Your Wish")
        form.columnconfigure(1, weight=1)
        form.protocol("WM_DELETE_WINDOW", self._close_form)
        self._form = form

        ttk.Label(form, text="Your Name").grid(row=0, column=0, padx=8, pady=6, sticky="w")
        self.name_var = tk.StringVar(value=self.guestbook.name)
        ttk.Entry(form, textvariable=self.name_var).grid(
            row=0, column=1, sticky="ew", padx=(0, 8), pady=6
        )

        ttk.Label(form, text="Your Message").grid(
            row=1, column=0, padx=8, pady=6, sticky="nw"
        )
        self.message_text = tk.Text(form, height=6, width=48, wrap="word")
        self.message_text.insert("1.0", self.guestbook.message)
        self.message_text.grid(row=1, column=1, sticky="ew", padx=(0, 8), pady=6)

        self.submit_button = ttk.Button(form, text="Submit", command=self._on_submit, width=18)
        self.submit_button.grid(row=2, column=1, padx=8, pady=(12, 8), sticky="e")

    def _close_form(self) -> None:
        self.guestbook.close_form()
        if self._form is not None:
            self._form.destroy()
            self._form = None

    # --- Actions -----------------------------------------------------------

    def _refresh(self) -> None:
        self._run_async("Fetch wishes", self.guestbook.refresh, on_success=self._render_wishes)

    def _on_submit(self) -> None:
        self.guestbook.name = self.name_var.get()
        self.guestbook.message = self.message_text.get("1.0", "end").strip()
        if not self.guestbook.can_submit():
            return

        self.submit_button.configure(state="disabled")

        def done() -> None:
            if self._form is not None and not self.guestbook.show_form:
                self._form.destroy()
                self._form = None
            self._render_wishes()

        def failed(exc: WishApiError) -> None:
            if self._form is not None:
                self.submit_button.configure(state="normal")
            messagebox.showerror("Submission failed", exc.message)

        self._run_async("Submit wish", self.guestbook.submit, on_success=done, on_error=failed)

    def _on_delete(self, wish_id: int) -> None:
        if not messagebox.askyesno("Delete", "Are you sure you want to delete this wish?"):
            return
        self._run_async(
            "Delete wish",
            lambda: self.guestbook.delete(wish_id),
            on_success=self._render_wishes,
        )

    def _on_reset(self) -> None:
        if not messagebox.askyesno("Reset", "Delete every wish in the guestbook?"):
            return

        def task() -> None:
            count = self.guestbook.reset()
            self.log(f"Removed {count} wish(es).")

        self._run_async("Reset wishes", task, on_success=self._render_wishes)

    # --- Networking helpers ----------------------------------------------

    def _run_async(
        self,
        label: str,
        callback: Callable[[], Any],
        *,
        on_success: Callable[[], None] | None = None,
        on_error: Callable[[WishApiError], None] | None = None,
    ) -> None:
        def task() -> None:
            self.log(f"{label}...")
            try:
                callback()
            except WishApiError as exc:
                self.log(f"{label} failed: {exc.message}")
                if on_error is not None:
                    self.after(0, lambda error=exc: on_error(error))
                return
            self.log(f"{label} done.")
            if on_success is not None:
                self.after(0, on_success)

        threading.Thread(target=task, daemon=True).start()

    # --- Logging helpers -------------------------------------------------

    def log(self, message: str) -> None:
        def _append() -> None:
            self.output.configure(state="normal")
            self.output.insert("end", f"{message}\n")
            self.output.configure(state="disabled")
            self.output.see("end")

        self.after(0, _append)


def main() -> None:
    app = GuestWishesWindow()
    app.mainloop()


if __name__ == "__main__":
    main()
