import tkinter as tk

class MenusBuilder:
    """
    Construye menús y conecta callbacks del historial.
    """
    def __init__(self, master: tk.Tk):
        self.master = master

    def build(self, on_undo, on_redo, on_reset, on_clear):
        menubar = tk.Menu(self.master)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label='Salir', command=self.master.destroy)
        menubar.add_cascade(label='Archivo', menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=0)
        edit_menu.add_command(label='Deshacer', command=on_undo, accelerator='Ctrl+Z')
        edit_menu.add_command(label='Rehacer', command=on_redo, accelerator='Ctrl+Y')
        edit_menu.add_separator()
        edit_menu.add_command(label='Restablecer', command=on_reset)
        edit_menu.add_command(label='Limpiar historial', command=on_clear)
        menubar.add_cascade(label='Edición', menu=edit_menu)

        self.master.bind_all('<Control-z>', lambda e: on_undo())
        self.master.bind_all('<Control-y>', lambda e: on_redo())
        self.master.config(menu=menubar)
        return menubar
