#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Inventory Management System - Main Entry Point
"""
import logging

from settings import load_settings


def configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    settings = load_settings()
    configure_logging(settings.get("log_level", "INFO"))

    from gui import MainWindow
    app = MainWindow(settings=settings)
    app.mainloop()


if __name__ == "__main__":
    main()
