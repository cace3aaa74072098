"""File pickers for save/load requests using tkinter."""

from typing import Optional

FILETYPES = [("JSON", "*.json"), ("YAML", "*.yaml *.yml"), ("All files", "*.*")]


class FileDialogs:
    """Modal save/open dialogs. Each returns a path, or None when cancelled."""
    
    def __init__(self, initial_dir: Optional[str] = None):
        self.initial_dir = initial_dir
    
    def _with_root(self, dialog_name: str, **kwargs) -> Optional[str]:
        # Imported here so headless use never needs a Tk installation
        import tkinter as tk
        from tkinter import filedialog
        
        root = tk.Tk()
        root.withdraw()
        try:
            ask = getattr(filedialog, dialog_name)
            path = ask(parent=root, initialdir=self.initial_dir, filetypes=FILETYPES, **kwargs)
        finally:
            root.destroy()
        # Cancel yields '' or an empty tuple depending on the platform
        return path or None
    
    def ask_save_path(self) -> Optional[str]:
        return self._with_root("asksaveasfilename", title="Save Bodies", defaultextension=".json")
    
    def ask_load_path(self) -> Optional[str]:
        return self._with_root("askopenfilename", title="Load Bodies")
