# UI.py
""""PySide6 user interface for the PEMDAS Calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Dispatch the expression to MathEngine in a worker thread
- Render results and show MathEngine errors as dialogs
- Keep the display readable (auto-shrinking font, dark/light mode)
- Copy the display to the clipboard


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via Config_Manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately


Threading Note
--------------
Evaluation is executed off the UI thread in Worker(QObject), so the UI keeps handling events.
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal
import sys
import math
import threading
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module


OPERATORS = ["+", "-", "*", "/", "%", "^"]
ENTER = "⏎"
COPY = "📋"
SETTINGS = "⚙"


class Worker(QObject):
    """""

    Runs in a separate thread, transmits the problem to MathEngine.py and emits a signal
    when the calculation is done / failed back to the Calculator UI for processing.

    """""

    job_finished = Signal(object, str, object)

    def __init__(self, problem, settings):
        super().__init__()
        self.data = problem
        self.settings = settings

    def run_Calc(self):

        try:
            # --- 1. Start Calculation ---
            ergebnis = MathEngine.evaluate(self.data)
            MathEngine.trace(self.data, ergebnis, self.settings)
            rendered = MathEngine.render(ergebnis, self.settings)

            # --- 2. Send Success Signal ---
            # Emits the rendered text plus the raw value (used to continue calculating)
            self.job_finished.emit(rendered, self.data, ergebnis)

        except E.MathError as e:
            # --- 3. Send Math Error Signal ---
            # Found a known, handled error (e.g., "Division by zero")
            self.job_finished.emit(e, self.data, None)

        except Exception as e:
            # --- 4. Send Critical Error Signal ---
            # Found an unexpected crash (e.g., RecursionError on absurd nesting)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data, None)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Manages the settings window, saves the new settings and opens an error
    message if something went wrong.

    Settings are either checkboxes (True / False) or input fields (integers).

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Setting key -> widget, used when saving

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- 3a. Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- 3b. Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            # --- 1. Checkboxes ---
            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            # --- 2. Input Fields (like 'decimal_places') ---
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < 2:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                except ValueError as e:
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!

                setting_value_list[key_value] = new_value_int

        # --- 3. Write to File ---
        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorPrototype(QtWidgets.QWidget):
    MAX_FONT_SIZE = 46
    MIN_FONT_SIZE = 10

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.ans = None  # Raw float of the last result
        self.display_text = "0"
        self.thread_active = False  # Is a calculation running?
        self.received_result = False  # Is the display showing a result?
        self.worker = None

        # --- 3. Window Setup ---
        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.resize(400, 540)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(self.MAX_FONT_SIZE)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 3)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            (SETTINGS, 0, 0), (COPY, 0, 1), ('C', 0, 2), ('<', 0, 3), ('/', 0, 4),
            ('(', 1, 0), (')', 1, 1), ('^', 1, 2), ('%', 1, 3), ('*', 1, 4),
            ('7', 2, 0), ('8', 2, 1), ('9', 2, 2), ('.', 2, 3), ('-', 2, 4),
            ('4', 3, 0), ('5', 3, 1), ('6', 3, 2), ('e', 3, 3), ('+', 3, 4),
            ('1', 4, 0), ('2', 4, 1), ('3', 4, 2), ('0', 4, 3), (ENTER, 4, 4)
        ]

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Window/Key Event Handlers ---
    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update_font_size_display()

    def keyPressEvent(self, event):
        # Keyboard input mirrors the buttons
        key_text = event.text()
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.handle_button_press(ENTER)
        elif event.key() == Qt.Key.Key_Backspace:
            self.handle_button_press("<")
        elif event.key() == Qt.Key.Key_Escape:
            self.handle_button_press("C")
        elif key_text and key_text in "0123456789.()+-*/%^eE ":
            self.handle_button_press(key_text)
        else:
            super().keyPressEvent(event)

    def handle_button_press(self, value):
        if value == ENTER:
            self.start_calculation()
            return

        if value == COPY:
            pyperclip.copy(self.display.text())
            return

        # Continue from the last result: operators reuse it, anything else starts over
        if self.received_result:
            self.received_result = False
            if value in OPERATORS and self.ans is not None and math.isfinite(self.ans):
                self.display_text = repr(self.ans)
            else:
                self.display_text = "0"

        if value == "<":
            self.display_text = self.display_text[:-1]
            if self.display_text == "":
                self.display_text = "0"

        elif value == "C":
            self.display_text = "0"

        else:
            if self.display_text == "0" and value not in OPERATORS:
                self.display_text = ""
            self.display_text += value

        self.display.setText(self.display_text)
        self.update_font_size_display()

    def start_calculation(self):
        if self.thread_active:
            self.show_error(E.MathError(E.ERROR_MESSAGES["4002"], code="4002", equation=self.display_text))
            return
        if self.received_result:
            return

        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")  # Show "..." to indicate loading
        QtWidgets.QApplication.processEvents()

        # --- Start Thread ---
        self.worker = Worker(self.display_text, self.setting_value_list)
        self.worker.job_finished.connect(self.Calc_result)
        worker_thread = threading.Thread(target=self.worker.run_Calc, daemon=True)
        worker_thread.start()

    def update_font_size_display(self):
        # --- Dynamic Font Resizing for Display ---
        current_text = self.display.text()
        font = self.display.font()
        current_size = self.MAX_FONT_SIZE

        margins = self.display.textMargins()
        available_width = self.display.width() - (margins.left() + margins.right() + 10)

        font.setPointSize(current_size)
        fm = QtGui.QFontMetrics(font)
        while fm.horizontalAdvance(current_text) > available_width and current_size > self.MIN_FONT_SIZE:
            current_size -= 1
            font.setPointSize(current_size)
            fm = QtGui.QFontMetrics(font)

        self.display.setFont(font)

    def update_return_button(self):
        # --- Visual Feedback for Calculation ---
        return_button = self.button_objects.get(ENTER)
        if not return_button:
            return

        if self.thread_active == True:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
        return_button.update()

    def update_darkmode(self):
        # --- Apply Dark/Light Mode to all buttons ---
        for text, button in self.button_objects.items():
            if text == ENTER:
                continue
            if self.setting_value_list["darkmode"] == True:
                button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            else:
                button.setStyleSheet("font-weight: normal;")
        self.update_return_button()

        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # Modal

        # Reload settings after dialog closes, so darkmode etc. apply immediately
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        return ""

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        additional_info = f"Details: {error_obj}\nEquation: {error_obj.equation}"

        error_box.setIcon(QtWidgets.QMessageBox.Icon.Critical)
        error_box.setWindowTitle(E.category(error_obj.code))
        error_box.setText(f"Error {error_obj.code}: {E.ERROR_MESSAGES.get(error_obj.code, 'Unknown error')}")
        error_box.setInformativeText(additional_info)
        error_box.setStandardButtons(QtWidgets.QMessageBox.StandardButton.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def Calc_result(self, result, equation, ergebnis):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            self.show_error(result)
            self.display.setText(equation)
            self.update_font_size_display()
            return

        self.ans = ergebnis
        self.received_result = True

        if self.setting_value_list["show_equation"] == True:
            final_display_text = f"{equation} {result}"
        else:
            final_display_text = result

        self.display.setText(final_display_text)
        self.update_font_size_display()


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorPrototype()
    window.show()
    return app.exec()
