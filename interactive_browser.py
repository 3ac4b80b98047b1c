"""
Interactive browser for generated n-ominoes.
Display one shape at a time and step through the collection with the keyboard.
"""

import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import shape_lines
from nomino import Shape, generate_shapes


class ShapeBrowser:
    """Step through a sorted collection of shapes."""

    def __init__(self, shapes: list[Shape], n: int) -> None:
        self.shapes = shapes
        self.n = n
        self.index = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def current(self) -> Shape | None:
        if not self.shapes:
            return None
        return self.shapes[self.index]

    def generate_display(self) -> Panel:
        """Generate the current display with shape and status."""
        shape = self.current

        if shape is None:
            status = Text()
            status.append("ERROR: No shapes to show!\n", style="bold red")
            return Panel(status, title="n-ominoes - Error", border_style="red")

        status = Text()
        status.append("Shape: ", style="bold")
        status.append(f"{self.index + 1} of {len(self.shapes)}\n")
        status.append("Size: ", style="bold")
        status.append(f"{shape.width} x {shape.height}\n\n")

        for line in shape_lines(shape):
            status.append(line + "\n", style="bold green")

        status.append("\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N / D - Next shape\n")
        status.append("  P / A - Previous shape\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title=f"Fixed {self.n}-ominoes", border_style="green", width=60)

    def step(self, delta: int) -> None:
        """Move through the collection, wrapping at either end."""
        if not self.shapes:
            return
        self.index = (self.index + delta) % len(self.shapes)
        self.status_message = f"Showing shape {self.index + 1}"

    def run(self) -> None:
        """Run the browser until the user quits."""
        if not self.shapes:
            print("ERROR: No shapes to show!")
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() in ("n", "d") or key == readchar.key.RIGHT:
                        self.step(1)
                    elif key.lower() in ("p", "a") or key == readchar.key.LEFT:
                        self.step(-1)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    try:
        n = int(sys.argv[1]) if len(sys.argv) > 1 else 4
        shapes = generate_shapes(n)
    except ValueError as e:
        print(e)
        sys.exit(1)
    ShapeBrowser(shapes, n).run()
