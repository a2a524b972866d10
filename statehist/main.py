import argparse
import logging
import tkinter as tk

from pydantic import ValidationError

from statehist.core.history import DEFAULT_MAX_HISTORY, HistoryOptions
from statehist.ui.main_window import MainWindow

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='statehist-demo',
                                     description='Campo de texto con deshacer/rehacer.')
    parser.add_argument('text', nargs='?', default='Hello World!', help='Texto inicial')
    parser.add_argument('--max-history', type=int, default=DEFAULT_MAX_HISTORY,
                        help='Número máximo de snapshots')
    parser.add_argument('--no-redo', dest='enable_redo', action='store_false',
                        help='Desactivar rehacer')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log en nivel DEBUG')
    args = parser.parse_args(argv)
    try:
        HistoryOptions(max_history=args.max_history, enable_redo=args.enable_redo)
    except ValidationError as exc:
        parser.error(f"opciones no válidas: {exc.errors()[0]['msg']}")
    return args

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    root = tk.Tk()
    root.title('State History')
    root.geometry('520x360')
    MainWindow(root, initial_text=args.text, max_history=args.max_history,
               enable_redo=args.enable_redo)
    root.mainloop()

if __name__ == '__main__':
    main()
