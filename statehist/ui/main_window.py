import tkinter as tk
from typing import Optional

from ..core.history import DEFAULT_MAX_HISTORY
from ..core.state_history import StateHistory
from .history_panel import HistoryPanel
from .menus import MenusBuilder

class MainWindow(tk.Frame):
    """
    Orquesta: campo de texto, historial, panel de snapshots y menús.
    """
    def __init__(self, master, initial_text: str = 'Hello World!',
                 max_history: int = DEFAULT_MAX_HISTORY, enable_redo: bool = True,
                 history: Optional[StateHistory] = None):
        super().__init__(master)
        self.master = master
        self.history = history if history is not None else StateHistory(
            initial_text, max_history=max_history, enable_redo=enable_redo)
        self.pack(fill='both', expand=True)
        self._restoring = False

        self.rowconfigure(1, weight=1)
        self.columnconfigure(1, weight=1)

        # Campo de texto (fila 0)
        self.text_var = tk.StringVar(value=self.history.state)
        self.entry = tk.Entry(self, textvariable=self.text_var, font=('Arial', 14), width=32)
        self.entry.grid(row=0, column=0, columnspan=2, sticky='ew', padx=8, pady=8)
        self.text_var.trace_add('write', self._on_text_change)

        # Panel historial y botones (fila 1)
        self.history_panel = HistoryPanel(self, on_select=self._on_select_entry)
        self.history_panel.grid(row=1, column=0, sticky='ns', padx=(8, 4))
        self._build_buttons()

        # Estado (fila 2)
        self.status_var = tk.StringVar()
        tk.Label(self, textvariable=self.status_var, anchor='w', justify='left',
                 bg='#f8f9fa').grid(row=2, column=0, columnspan=2, sticky='ew', padx=8, pady=8)

        # Menús
        MenusBuilder(self.master).build(
            self._undo_action, self._redo_action, self._reset_action, self._clear_action
        )

        self.history.subscribe(lambda snap: self._after_history_change())
        self._after_history_change()

    def _build_buttons(self):
        buttons = tk.Frame(self)
        buttons.grid(row=1, column=1, sticky='nw', padx=4)
        self.undo_btn = tk.Button(buttons, text='Deshacer (Ctrl+Z)', command=self._undo_action)
        self.redo_btn = tk.Button(buttons, text='Rehacer (Ctrl+Y)', command=self._redo_action)
        self.reset_btn = tk.Button(buttons, text='Restablecer', command=self._reset_action)
        self.clear_btn = tk.Button(buttons, text='Limpiar historial', command=self._clear_action)
        for btn in (self.undo_btn, self.redo_btn, self.reset_btn, self.clear_btn):
            btn.pack(fill='x', pady=2)

    # ---------- Eventos ----------
    def _on_text_change(self, *args):
        if self._restoring:
            return
        value = self.text_var.get()
        if value == self.history.state:
            return  # sin cambios
        self.history.set_state(value)

    def _on_select_entry(self, index):
        self.history.go_to_index(index)

    def _undo_action(self, event=None):
        if self.history.can_undo:
            self.history.undo()

    def _redo_action(self, event=None):
        if self.history.can_redo:
            self.history.redo()

    def _reset_action(self, event=None):
        self.history.reset()

    def _clear_action(self, event=None):
        self.history.clear()

    # ---------- Refresco ----------
    def _after_history_change(self):
        current = self.history.state
        if self.text_var.get() != current:
            # Volcar el snapshot sin registrar uno nuevo
            self._restoring = True
            try:
                self.text_var.set(current)
            finally:
                self._restoring = False
        self.history_panel.show(self.history.history, self.history.current_index)
        self.undo_btn.config(state='normal' if self.history.can_undo else 'disabled')
        self.redo_btn.config(state='normal' if self.history.can_redo else 'disabled')
        self.status_var.set(
            f'Estado actual: "{current}"\n'
            f'Entradas en historial: {len(self.history.history)}\n'
            f'Puede deshacer: {"Sí" if self.history.can_undo else "No"}\n'
            f'Puede rehacer: {"Sí" if self.history.can_redo else "No"}'
        )
