import tkinter as tk

class HistoryPanel(tk.Frame):
    """
    Lista de snapshots; al elegir uno se llama on_select(indice).
    """
    def __init__(self, master, on_select):
        super().__init__(master, width=200)
        self.on_select = on_select
        self.listbox = tk.Listbox(self, width=28, exportselection=False)
        self.scrollbar = tk.Scrollbar(self, orient='vertical', command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=self.scrollbar.set)
        self.listbox.pack(side='left', fill='y')
        self.scrollbar.pack(side='right', fill='y')
        self.listbox.bind('<<ListboxSelect>>', self._on_listbox_select)
        self.selected_index = None
        self._refreshing = False

    def show(self, entries, current_index):
        self._refreshing = True
        try:
            self.listbox.delete(0, 'end')
            for i, value in enumerate(entries):
                self.listbox.insert('end', f'{i}: {value!r}')
            self.select(current_index)
        finally:
            self._refreshing = False

    def select(self, index):
        self.selected_index = index
        self.listbox.selection_clear(0, 'end')
        self.listbox.selection_set(index)
        self.listbox.see(index)

    def _on_listbox_select(self, event=None):
        if self._refreshing:
            return
        sel = self.listbox.curselection()
        if not sel or sel[0] == self.selected_index:
            return
        self.selected_index = sel[0]
        self.on_select(sel[0])
