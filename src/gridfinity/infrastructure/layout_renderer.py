"""Layout diagram rendering.

This module provides SVG and ASCII rendering of a drawer layout showing
baseplates, half-size pieces and spacers in their placed positions.
"""

from __future__ import annotations

from gridfinity.domain import GridfinityResult, LayoutItem, PieceType, format_number

SPACER_COLOR = "rgba(255, 0, 0, 0.3)"
HALF_SIZE_COLOR = "rgba(0, 255, 0, 0.3)"
GOLDEN_ANGLE = 137.5


def get_color(piece_type: PieceType, index: int) -> str:
    """Fill color for a piece.

    Spacers are red and half-size pieces green. Baseplates step around the
    hue wheel by the golden angle so neighbours are easy to tell apart.
    """
    if piece_type is PieceType.SPACER:
        return SPACER_COLOR
    if piece_type is PieceType.HALF_SIZE:
        return HALF_SIZE_COLOR
    hue = (index * GOLDEN_ANGLE) % 360
    return f"hsl({format_number(hue)}, 70%, 80%)"


def _extent(layout: tuple[LayoutItem, ...]) -> tuple[float, float]:
    width = max((item.right_edge for item in layout), default=0.0)
    height = max((item.bottom_edge for item in layout), default=0.0)
    return width, height


class LayoutDiagramRenderer:
    """Renders drawer layouts in SVG and ASCII formats.

    Attributes:
        scale: Pixels per millimetre for SVG rendering (default 1.0).
        stroke: Stroke color for piece outlines.
        text_color: Color for labels.
        show_labels: Whether to print size labels inside pieces.
    """

    def __init__(
        self,
        scale: float = 1.0,
        stroke: str = "#333333",
        text_color: str = "#000000",
        show_labels: bool = True,
    ) -> None:
        self.scale = scale
        self.stroke = stroke
        self.text_color = text_color
        self.show_labels = show_labels

    def render_svg(self, result: GridfinityResult) -> str:
        """Generate an SVG diagram of the layout.

        Args:
            result: Calculation result to draw.

        Returns:
            SVG document as a string.
        """
        header_height = 30
        drawer_width, drawer_height = _extent(result.layout)
        svg_width = drawer_width * self.scale
        svg_height = drawer_height * self.scale + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="white"/>',
            self._render_header(result, drawer_width, drawer_height, svg_width, header_height),
            "",
            "  <!-- Pieces -->",
        ]
        for index, item in enumerate(result.layout):
            parts.append(self._render_item(item, index, header_height))

        parts.append("</svg>")
        return "\n".join(parts)

    def _render_header(
        self,
        result: GridfinityResult,
        drawer_width: float,
        drawer_height: float,
        svg_width: float,
        header_height: float,
    ) -> str:
        header_text = (
            f"Drawer {drawer_width:.1f} x {drawer_height:.1f} mm - "
            f"{result.total_pieces} pieces"
        )
        return (
            f'  <rect x="0" y="0" width="{svg_width}" height="{header_height}" '
            f'fill="#E0E0E0"/>\n'
            f'  <text x="10" y="{header_height - 8}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.text_color}">{header_text}</text>'
        )

    def _render_item(self, item: LayoutItem, index: int, header_height: float) -> str:
        x = item.pixel_x * self.scale
        y = header_height + item.pixel_y * self.scale
        w = item.pixel_width * self.scale
        h = item.pixel_height * self.scale
        fill = get_color(item.type, index)

        rect = (
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.stroke}"/>'
        )
        font_size = min(12, min(w, h) / 3)
        if not self.show_labels or item.type is PieceType.SPACER or font_size < 6:
            return f'  <g class="{item.type.value}">\n{rect}\n  </g>'

        label = item.size_label
        return "\n".join(
            [
                f'  <g class="{item.type.value}">',
                rect,
                f'    <text x="{x + w / 2}" y="{y + h / 2}" text-anchor="middle" '
                f'dominant-baseline="middle" font-family="Arial, sans-serif" '
                f'font-size="{font_size}" fill="{self.text_color}">{label}</text>',
                "  </g>",
            ]
        )

    def render_ascii(self, result: GridfinityResult, width: int = 80) -> str:
        """Generate an ASCII diagram of the layout for terminal display.

        Args:
            result: Calculation result to draw.
            width: Terminal width in characters (default 80).
        """
        if result.is_empty:
            return "(empty layout)"

        drawer_width, drawer_height = _extent(result.layout)
        usable_width = width - 2
        scale_x = usable_width / drawer_width
        # Terminal cells are roughly twice as tall as they are wide
        grid_height = max(int(usable_width * (drawer_height / drawer_width) * 0.5), 10)
        scale_y = grid_height / drawer_height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for item in result.layout:
            self._draw_item_ascii(grid, item, scale_x, scale_y)

        lines = [f"Drawer {drawer_width:.1f} x {drawer_height:.1f} mm"]
        lines.append("+" + "-" * usable_width + "+")
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_item_ascii(
        self,
        grid: list[list[str]],
        item: LayoutItem,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        x1 = max(0, min(int(item.pixel_x * scale_x), grid_width - 1))
        x2 = max(0, min(int(item.right_edge * scale_x), grid_width - 1))
        y1 = max(0, min(int(item.pixel_y * scale_y), grid_height - 1))
        y2 = max(0, min(int(item.bottom_edge * scale_y), grid_height - 1))

        fill = {PieceType.SPACER: ".", PieceType.HALF_SIZE: ":"}.get(item.type)
        if fill is not None:
            for y in range(y1 + 1, y2):
                for x in range(x1 + 1, x2):
                    grid[y][x] = fill

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        if item.type is PieceType.SPACER:
            return
        label = item.size_label
        row = y1 + 1
        if row < y2 and x1 + 1 + len(label) < x2:
            for i, char in enumerate(label):
                grid[row][x1 + 1 + i] = char
