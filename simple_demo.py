#!/usr/bin/env python3
"""Simple demo script showcasing RegionDock with four floating windows."""

import logging
import sys
from PySide6.QtWidgets import (QApplication, QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem,
                               QLabel, QTextEdit, QListWidget, QProgressBar, QSlider)
from PySide6.QtCore import Qt, QRectF

from RegionDock import WindowDescriptor
from RegionDock.widgets import DockHost


def create_table_widget():
    """Create a table widget with sample data."""
    table = QTableWidget(5, 3)
    table.setHorizontalHeaderLabels(['Name', 'Age', 'City'])

    data = [
        ['Alice', '25', 'New York'],
        ['Bob', '30', 'Los Angeles'],
        ['Charlie', '35', 'Chicago'],
        ['Diana', '28', 'Miami'],
        ['Eve', '32', 'Seattle']
    ]

    for row, row_data in enumerate(data):
        for col, value in enumerate(row_data):
            table.setItem(row, col, QTableWidgetItem(value))

    return table


def create_text_widget():
    """Create a text editing widget."""
    text_edit = QTextEdit()
    text_edit.setPlainText("Drag a window by its header onto one of the arrow targets to dock it.\n\n"
                           "Press the active tab of a region to pull the window back out.")
    return text_edit


def create_list_widget():
    """Create a list widget with sample items."""
    list_widget = QListWidget()
    for item in ['Item 1', 'Item 2', 'Item 3', 'Important Item', 'Another Item', 'Last Item']:
        list_widget.addItem(item)
    return list_widget


def create_controls_widget():
    """Create a widget with various controls."""
    widget = QWidget()
    layout = QVBoxLayout(widget)

    layout.addWidget(QLabel("Progress:"))
    progress = QProgressBar()
    progress.setValue(65)
    layout.addWidget(progress)

    layout.addWidget(QLabel("Volume:"))
    slider = QSlider(Qt.Horizontal)
    slider.setValue(50)
    layout.addWidget(slider)

    return widget


def main():
    logging.basicConfig(level=logging.DEBUG if "--debug" in sys.argv else logging.INFO)
    app = QApplication(sys.argv)

    contents = [
        ("Table", create_table_widget()),
        ("Notes", create_text_widget()),
        ("Items", create_list_widget()),
        ("Controls", create_controls_widget()),
    ]

    # Position windows in a cascade
    descriptors = [
        WindowDescriptor(id=i, content=widget, title=title, geometry=QRectF(100 + i * 50, 100 + i * 50, 320, 240))
        for i, (title, widget) in enumerate(contents)
    ]

    host = DockHost(descriptors)
    host.setWindowTitle("RegionDock Simple Demo")
    host.resize(1200, 800)
    host.manager.signals.layout_changed.connect(host.manager.log_layout)
    host.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
