"""Interactive menu for entering, transposing and multiplying matrices.

The menu owns every prompt and retry loop; the matrix engine only ever sees
validated values. All engine errors are reported and the loop carries on.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console

from lalib.config import Settings, load_settings
from lalib.io.parsing import (
    MenuChoice,
    parse_dimension,
    parse_menu_choice,
    parse_order,
    parse_row,
    parse_slot,
)
from lalib.logging import get_logger
from lalib.matrix.engine import can_multiply, fill_matrix, multiply, transpose
from lalib.matrix.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    MalformedRowError,
    MatrixError,
)
from lalib.matrix.models import Matrix, Row
from lalib.matrix.render import render, render_table
from lalib.session import Session

logger = get_logger(__file__)

MENU = """
******************************
*   Linear Algebra Library   *
******************************
*  Please choose an option.  *
*  1. Input matrix           *
*  2. Transpose matrix       *
*  3. Matrix multiplication  *
*  4. Print matrices         *
*  5. Quit                   *
******************************
"""

INVALID_INPUT = "Please enter a valid input."


class Menu:
    """Run the menu loop against a :class:`Session`.

    ``input_fn`` is called with a prompt and returns one line of user input;
    it defaults to ``console.input``. End of input ends the session.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        input_fn: Optional[Callable[[str], str]] = None,
    ):
        self.session = session if session is not None else Session()
        self.settings = settings if settings is not None else load_settings()
        self.console = console if console is not None else Console()
        self.input_fn = input_fn if input_fn is not None else self.console.input
        self._handlers = {
            MenuChoice.INPUT: self.input_matrix,
            MenuChoice.TRANSPOSE: self.transpose_matrix,
            MenuChoice.MULTIPLY: self.multiply_matrices,
            MenuChoice.PRINT: self.print_matrices,
        }

    def _say(self, message: str) -> None:
        self.console.print(message, highlight=False, markup=False)

    def _ask(self, prompt: str) -> str:
        return self.input_fn(prompt)

    def run(self) -> Session:
        logger.info("menu session started")
        try:
            while self.step():
                pass
        except EOFError:
            logger.info("end of input, leaving menu")
        self._say("Bye!")
        return self.session

    def step(self) -> bool:
        """Show the menu, read one choice and handle it.

        Returns ``False`` once the user chose to quit.
        """

        self._say(MENU)
        choice = parse_menu_choice(self._ask("> "))
        while choice is None:
            self._say(INVALID_INPUT)
            self._say(MENU)
            choice = parse_menu_choice(self._ask("> "))

        if choice is MenuChoice.QUIT:
            return False

        try:
            self._handlers[choice]()
        except MatrixError as exc:
            logger.warning("%s failed: %s", choice.name.lower(), exc)
            self._say(f"Error: {exc}")
        return True

    def choose_slot(self, question: str) -> str:
        slot = parse_slot(self._ask(f"{question} (A or B) "))
        while slot is None:
            self._say(INVALID_INPUT)
            slot = parse_slot(self._ask(f"{question} (A or B) "))
        return slot

    def _ask_dimension(self, name: str) -> int:
        while True:
            raw = self._ask(f"{name.capitalize()}: ")
            try:
                return parse_dimension(raw, name, maximum=self.settings.max_dimension)
            except InvalidDimensionError as exc:
                logger.warning("rejected %s: %s", name, exc)
                self._say(f"Error: {exc}")

    def prompt_matrix(self) -> Matrix:
        """Ask for the dimensions and then each row.

        A rejected row is asked for again; rows already accepted are kept.
        """

        height = self._ask_dimension("height")
        width = self._ask_dimension("width")
        self._say(f"Enter {height} rows of {width} integers separated by spaces.")

        rows: list[Optional[Row]] = [None] * height
        for index in range(height):
            while rows[index] is None:
                line = self._ask(f"Row {index + 1}: ")
                try:
                    rows[index] = parse_row(line, width)
                except MalformedRowError as exc:
                    logger.warning("rejected row %d: %s", index + 1, exc)
                    self._say(f"Error: {exc}")

        return fill_matrix(height, width, rows)

    def input_matrix(self) -> None:
        slot = self.choose_slot("Which matrix would you like to input?")
        matrix = self.prompt_matrix()
        self.session.store(slot, matrix)
        logger.info("stored %dx%d matrix in slot %s", matrix.height, matrix.width, slot)
        self.show(matrix, f"Matrix {slot}")

    def transpose_matrix(self) -> None:
        slot = self.choose_slot("Which matrix would you like to transpose?")
        result = transpose(self.session.require(slot))
        self.session.store(slot, result)
        logger.info("transposed slot %s to %dx%d", slot, result.height, result.width)
        self.show(result, f"Matrix {slot} (transposed)")

    def multiply_matrices(self) -> None:
        order = parse_order(self._ask("Multiplication order (AB or BA): "))
        while order is None:
            self._say(INVALID_INPUT)
            order = parse_order(self._ask("Multiplication order (AB or BA): "))

        first_slot, second_slot = order
        first = self.session.require(first_slot)
        second = self.session.require(second_slot)
        if not can_multiply(first, second):
            raise DimensionMismatchError(first.shape, second.shape)

        product = multiply(first, second)
        self.session.product = product
        logger.info(
            "multiplied %s x %s into a %dx%d product",
            first_slot,
            second_slot,
            product.height,
            product.width,
        )
        self.show(product, f"{first_slot} x {second_slot}")

    def print_matrices(self) -> None:
        for slot, matrix in self.session.items():
            self.show(matrix, f"Matrix {slot}")
        if not self.session.product.is_unset:
            self.show(self.session.product, "Last product")

    def show(self, matrix: Matrix, title: str) -> None:
        if self.settings.rich_output:
            render_table(matrix, title=title, console=self.console)
            return
        self._say(f"{title}:")
        for line in render(matrix, self.settings.delimiter):
            self._say(line)


def run_menu(
    session: Optional[Session] = None,
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
    input_fn: Optional[Callable[[str], str]] = None,
) -> Session:
    """Run an interactive session until the user quits."""

    return Menu(session=session, settings=settings, console=console, input_fn=input_fn).run()


__all__ = ["Menu", "run_menu", "MENU", "INVALID_INPUT"]
