"""
GUI Application for Inventory Management System (Tkinter)

The window keeps every screen ("card") stacked in the same grid cell and
raises the one being shown.
"""
import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Any, Optional
import tkinter.font as tkfont

from errors import ErrorKind, InventoryError
from models import Product, format_currency
from services import InventoryManager
from settings import load_settings
from validators import (
    parse_price,
    parse_quantity,
    validate_expiry,
    validate_name,
    validate_product_id,
)

logger = logging.getLogger(__name__)

PALE_BLUE = "#dce6ff"
DARK_BLUE = "#000066"
WHITE = "#ffffff"

MENU = "Menu"
ADD_PRODUCT = "AddProduct"
VIEW_PRODUCTS = "ViewProducts"
UPDATE_PRODUCT = "UpdateProduct"
DELETE_PRODUCT = "DeleteProduct"
SEARCH_PRODUCT = "SearchProduct"
EXIT = "Exit"


def enable_treeview_sort(tree: ttk.Treeview) -> None:
    def sortby(col_id: str, reverse: bool) -> None:
        rows = [(tree.set(k, col_id), k) for k in tree.get_children("")]

        def parse_val(v: str):
            try:
                return (0, float(v.replace(",", "").strip()))
            except ValueError:
                return (1, v.lower())

        rows.sort(key=lambda t: parse_val(t[0]), reverse=reverse)
        for idx, (_, k) in enumerate(rows):
            tree.move(k, "", idx)
        tree.heading(col_id, command=lambda: sortby(col_id, not reverse))

    for col in tree["columns"]:
        tree.heading(col, command=lambda c=col: sortby(c, False))


class Card(ttk.Frame):
    """A full-size screen inside the main content area"""

    title = ""

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, style="Card.TFrame", padding=(60, 30))
        self.app = app
        self.manager = app.manager
        self.columnconfigure(0, weight=1)
        if self.title:
            ttk.Label(self, text=self.title, style="SubHeading.TLabel", anchor=tk.CENTER).grid(
                row=0, column=0, sticky="ew", pady=(0, 20)
            )

    def on_show(self) -> None:
        pass

    def _form(self, row: int = 1) -> ttk.Frame:
        form = ttk.Frame(self, style="Card.TFrame")
        form.grid(row=row, column=0)
        return form

    def _field(self, form: ttk.Frame, row: int, label: str, var: tk.StringVar) -> ttk.Entry:
        ttk.Label(form, text=label, style="Form.TLabel").grid(row=row, column=0, sticky=tk.W, padx=10, pady=6)
        entry = ttk.Entry(form, textvariable=var, width=24, font=self.app.main_font)
        entry.grid(row=row, column=1, sticky="ew", padx=10, pady=6)
        return entry

    def _controls(self, row: int, action_text: str, command) -> ttk.Frame:
        controls = ttk.Frame(self, style="Card.TFrame")
        controls.grid(row=row, column=0, pady=(20, 0))
        if action_text:
            ttk.Button(controls, text=action_text, command=command).pack(side=tk.LEFT, padx=10)
        ttk.Button(controls, text="Back to Menu", command=lambda: self.app.show_card(MENU)).pack(side=tk.LEFT, padx=10)
        return controls


class MenuCard(Card):
    ENTRIES = (
        ("1. Add Product", ADD_PRODUCT),
        ("2. View All Products", VIEW_PRODUCTS),
        ("3. Update Product", UPDATE_PRODUCT),
        ("4. Delete Product", DELETE_PRODUCT),
        ("5. Search Product by ID", SEARCH_PRODUCT),
        ("6. Exit", EXIT),
    )

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        for idx, (text, card_name) in enumerate(self.ENTRIES, start=1):
            ttk.Button(
                self,
                text=text,
                style="Menu.TButton",
                width=26,
                command=lambda c=card_name: self._open(c),
            ).grid(row=idx, column=0, pady=8)

    def _open(self, card_name: str) -> None:
        if card_name == EXIT:
            self.app.on_exit()
        else:
            self.app.show_card(card_name)


class AddProductCard(Card):
    title = "Add New Product"

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        self.id_var = tk.StringVar(self)
        self.name_var = tk.StringVar(self)
        self.price_var = tk.StringVar(self)
        self.qty_var = tk.StringVar(self)
        self.perishable_var = tk.BooleanVar(self, value=False)
        self.expiry_var = tk.StringVar(self)

        form = self._form()
        self._field(form, 0, "Product ID (0XX):", self.id_var)
        self._field(form, 1, "Name:", self.name_var)
        self._field(form, 2, f"Price ({app.currency_symbol} 0.00):", self.price_var)
        self._field(form, 3, "Quantity:", self.qty_var)
        ttk.Checkbutton(
            form,
            text="Is Perishable?",
            variable=self.perishable_var,
            style="Card.TCheckbutton",
            command=self._toggle_expiry,
        ).grid(row=4, column=0, sticky=tk.W, padx=10, pady=6)
        self.expiry_entry = self._field(form, 5, "Expiry Date (DD/MM/YYYY):", self.expiry_var)
        self.expiry_entry.state(["disabled"])

        self._controls(2, "Save Product", self.save)

    def _toggle_expiry(self) -> None:
        if self.perishable_var.get():
            self.expiry_entry.state(["!disabled"])
        else:
            self.expiry_var.set("")
            self.expiry_entry.state(["disabled"])

    def build_product(self) -> Product:
        product_id = validate_product_id(self.id_var.get())
        price = parse_price(self.price_var.get())
        quantity = parse_quantity(self.qty_var.get())
        name = validate_name(self.name_var.get())
        expiry = None
        if self.perishable_var.get():
            expiry = validate_expiry(self.expiry_var.get())
        return Product(product_id, name, price, quantity, expiry)

    def clear(self) -> None:
        for var in (self.id_var, self.name_var, self.price_var, self.qty_var, self.expiry_var):
            var.set("")
        self.perishable_var.set(False)
        self._toggle_expiry()

    def save(self) -> None:
        try:
            self.manager.add(self.build_product())
        except InventoryError as e:
            messagebox.showerror("Input Error", e.message, parent=self)
            return
        messagebox.showinfo("Success", "Product added successfully!", parent=self)
        self.app.update_total_label()
        self.clear()
        self.app.show_card(MENU)


class ViewProductsCard(Card):
    title = "Current Inventory List"

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        self.rowconfigure(1, weight=1)

        columns = ("product_id", "name", "price", "quantity", "expiry_date")
        table = ttk.Frame(self, style="Card.TFrame")
        table.grid(row=1, column=0, sticky="nsew")
        table.columnconfigure(0, weight=1)
        table.rowconfigure(0, weight=1)
        self.tree = ttk.Treeview(table, columns=columns, show="headings", height=14)
        for c, label, width, anchor in (
            ("product_id", "ID", 70, tk.W),
            ("name", "Name", 260, tk.W),
            ("price", f"Price ({app.currency_symbol})", 120, tk.E),
            ("quantity", "Qty", 90, tk.E),
            ("expiry_date", "Expiry", 140, tk.W),
        ):
            self.tree.heading(c, text=label)
            self.tree.column(c, width=width, anchor=anchor)
        vsb = ttk.Scrollbar(table, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")
        enable_treeview_sort(self.tree)
        self.tree.tag_configure("odd", background="#f4f7ff")

        self.empty_var = tk.StringVar(self)
        ttk.Label(self, textvariable=self.empty_var, style="Form.TLabel").grid(row=2, column=0, pady=(8, 0))

        self._controls(3, "", None)

    def on_show(self) -> None:
        self.refresh()

    def refresh(self) -> None:
        for item in self.tree.get_children():
            self.tree.delete(item)
        products = self.manager.list_products()
        self.empty_var.set("" if products else "No products in inventory.")
        columns = self.tree["columns"]
        for idx, p in enumerate(products):
            row = p.to_dict()
            row["price"] = f"{p.price:.2f}"
            row["expiry_date"] = p.expiry_date or ""
            tags = ("odd",) if idx % 2 else ()
            self.tree.insert("", tk.END, values=[row[c] for c in columns], tags=tags)


class UpdateProductCard(Card):
    title = "Update Existing Product"

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        self.id_var = tk.StringVar(self)
        self.price_var = tk.StringVar(self)
        self.qty_var = tk.StringVar(self)
        self.current_info_var = tk.StringVar(self, value="Current Info: N/A")

        form = self._form()
        id_entry = self._field(form, 0, "Product ID (0XX):", self.id_var)
        self._field(form, 1, f"New Price ({app.currency_symbol} 0.00):", self.price_var)
        self._field(form, 2, "New Quantity:", self.qty_var)
        ttk.Label(form, textvariable=self.current_info_var, style="Form.TLabel").grid(
            row=3, column=1, sticky=tk.W, padx=10, pady=6
        )
        id_entry.bind("<FocusOut>", lambda e: self.show_current_info())

        self._controls(2, "Update Product", self.save)

    def show_current_info(self) -> None:
        try:
            product = self.manager.find(validate_product_id(self.id_var.get()))
        except InventoryError as e:
            if e.kind is ErrorKind.NOT_FOUND:
                self.current_info_var.set("Current Info: Product Not Found")
            else:
                self.current_info_var.set(f"Current Info: {e.message}")
            return
        price = format_currency(product.price, self.app.currency_symbol)
        self.current_info_var.set(f"Current Price: {price}, Qty: {product.quantity}")

    def clear(self) -> None:
        for var in (self.id_var, self.price_var, self.qty_var):
            var.set("")
        self.current_info_var.set("Current Info: N/A")

    def save(self) -> None:
        try:
            product_id = validate_product_id(self.id_var.get())
            price = parse_price(self.price_var.get())
            quantity = parse_quantity(self.qty_var.get())
            self.manager.update(product_id, price, quantity)
        except InventoryError as e:
            title = "Update Failed" if e.kind is ErrorKind.NOT_FOUND else "Input Error"
            messagebox.showerror(title, e.message, parent=self)
            return
        messagebox.showinfo("Success", f"Product ID {product_id} updated successfully!", parent=self)
        self.clear()
        self.app.show_card(MENU)


class DeleteProductCard(Card):
    title = "Delete Product by ID"

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        self.id_var = tk.StringVar(self)
        form = self._form()
        self._field(form, 0, "Enter Product ID (0XX):", self.id_var)
        self._controls(2, "Delete Product", self.delete)

    def delete(self) -> None:
        try:
            product_id = validate_product_id(self.id_var.get())
            if not messagebox.askyesno(
                "Confirm Deletion",
                f"Are you sure you want to delete Product ID: {product_id}?",
                parent=self,
            ):
                return
            self.manager.delete(product_id)
        except InventoryError as e:
            title = "Deletion Failed" if e.kind is ErrorKind.NOT_FOUND else "Input Error"
            messagebox.showerror(title, e.message, parent=self)
            return
        self.app.update_total_label()
        messagebox.showinfo("Success", f"Product ID {product_id} deleted successfully!", parent=self)
        self.id_var.set("")
        self.app.show_card(MENU)


class SearchProductCard(Card):
    title = "Search Product by ID"

    def __init__(self, parent: ttk.Frame, app: "MainWindow") -> None:
        super().__init__(parent, app)
        self.id_var = tk.StringVar(self)
        form = self._form()
        entry = self._field(form, 0, "Enter Product ID (0XX):", self.id_var)
        entry.bind("<Return>", lambda e: self.search())

        self.result_text = tk.Text(
            self,
            height=5,
            width=60,
            font=app.main_font,
            foreground=DARK_BLUE,
            background=WHITE,
            relief="solid",
            borderwidth=1,
        )
        self.result_text.grid(row=2, column=0, sticky="ew", pady=(10, 0))
        self.result_text.configure(state="disabled")

        self._controls(3, "Search", self.search)

    def _set_result(self, text: str) -> None:
        self.result_text.configure(state="normal")
        self.result_text.delete("1.0", tk.END)
        self.result_text.insert("1.0", text)
        self.result_text.configure(state="disabled")

    def result(self) -> str:
        return self.result_text.get("1.0", "end-1c")

    def search(self) -> None:
        try:
            product = self.manager.find(validate_product_id(self.id_var.get()))
        except InventoryError as e:
            self._set_result(e.message)
            return
        self._set_result("Product Found:\n" + product.display_string(self.app.currency_symbol))


CARDS = (
    (MENU, MenuCard),
    (ADD_PRODUCT, AddProductCard),
    (VIEW_PRODUCTS, ViewProductsCard),
    (UPDATE_PRODUCT, UpdateProductCard),
    (DELETE_PRODUCT, DeleteProductCard),
    (SEARCH_PRODUCT, SearchProductCard),
)


class MainWindow(tk.Tk):
    def __init__(self, manager: Optional[InventoryManager] = None, settings: Optional[dict[str, Any]] = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else load_settings()
        self.currency_symbol = self.settings["currency"]
        app_title = self.settings["app_title"]

        if manager is None:
            manager = InventoryManager()
            if self.settings.get("seed_products", True):
                manager.add_initial_products()
        self.manager = manager

        self.title(app_title)
        self.geometry("1000x700")
        self.configure(background=PALE_BLUE)
        self._apply_style()

        heading = ttk.Label(self, text=f"Welcome to {app_title}", style="Heading.TLabel", anchor=tk.CENTER)
        heading.pack(side=tk.TOP, fill=tk.X, pady=20, padx=10)

        # Footer before content so it keeps its space when the window shrinks
        footer = ttk.Frame(self, style="Card.TFrame", padding=(5, 5, 10, 5))
        footer.pack(side=tk.BOTTOM, fill=tk.X)
        self.total_var = tk.StringVar(self)
        ttk.Label(footer, textvariable=self.total_var, style="Form.TLabel").pack(side=tk.RIGHT)
        self.update_total_label()

        content = ttk.Frame(self, style="Card.TFrame")
        content.pack(fill=tk.BOTH, expand=True)
        content.columnconfigure(0, weight=1)
        content.rowconfigure(0, weight=1)

        self.cards: dict[str, Card] = {}
        for name, card_cls in CARDS:
            card = card_cls(content, self)
            card.grid(row=0, column=0, sticky="nsew")
            self.cards[name] = card
        self.current_card = ""
        self.show_card(MENU)

        self.after(50, self._center_on_screen)
        self.bind_all("<Escape>", lambda e: self.show_card(MENU))
        self.protocol("WM_DELETE_WINDOW", self.on_exit)

    def _apply_style(self) -> None:
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            logger.debug("Theme 'clam' not available, keeping %s", style.theme_use())
        default_font = tkfont.nametofont("TkDefaultFont")
        family = "Segoe UI" if "Segoe UI" in tkfont.families() else default_font.cget("family")
        self.main_font = tkfont.Font(family=family, size=14)
        heading_font = tkfont.Font(family=family, size=24, weight="bold")
        sub_heading_font = tkfont.Font(family=family, size=18, weight="bold")
        menu_font = tkfont.Font(family=family, size=16, weight="bold")

        style.configure("Card.TFrame", background=PALE_BLUE)
        style.configure("Heading.TLabel", background=PALE_BLUE, foreground=DARK_BLUE, font=heading_font)
        style.configure("SubHeading.TLabel", background=PALE_BLUE, foreground=DARK_BLUE, font=sub_heading_font)
        style.configure("Form.TLabel", background=PALE_BLUE, foreground=DARK_BLUE, font=self.main_font)
        style.configure("Card.TCheckbutton", background=PALE_BLUE, foreground=DARK_BLUE, font=self.main_font)
        style.configure("TButton", padding=6, background=WHITE, foreground=DARK_BLUE, font=self.main_font)
        style.configure("Menu.TButton", padding=10, font=menu_font)
        style.configure("Treeview", rowheight=26, font=self.main_font)
        style.configure("Treeview.Heading", font=self.main_font)

    def show_card(self, name: str) -> None:
        card = self.cards[name]
        card.on_show()
        card.tkraise()
        self.current_card = name
        logger.debug("Showing card %s", name)

    def update_total_label(self) -> None:
        self.total_var.set(f"Total Items: {self.manager.count()}")

    def _center_on_screen(self) -> None:
        self.update_idletasks()
        w = self.winfo_width()
        h = self.winfo_height()
        sw = self.winfo_screenwidth()
        sh = self.winfo_screenheight()
        x = max(0, (sw - w) // 2)
        y = max(0, (sh - h) // 3)
        self.geometry(f"{w}x{h}+{x}+{y}")

    def on_exit(self) -> None:
        if messagebox.askokcancel("Exit", "Quit the application?", parent=self):
            logger.info("Exiting with %d products in inventory", self.manager.count())
            self.destroy()


if __name__ == "__main__":
    from main import main
    main()
