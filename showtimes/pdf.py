"""A small PDF writer for single-column reports on A4 pages."""

from __future__ import annotations

_MM = 72 / 25.4
_PAGE_SIZE_MM = (210.0, 297.0)

# Widths of the Helvetica glyphs for ASCII 32..126, in thousandths of an em.
_HELVETICA_WIDTHS = (
    278, 278, 355, 556, 556, 889, 667, 191, 333, 333, 389, 584, 278, 333, 278, 278,
    556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 278, 278, 584, 584, 584, 556,
    1015, 667, 667, 722, 722, 667, 611, 778, 722, 278, 500, 667, 556, 833, 722, 778,
    667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 278, 278, 278, 469, 556,
    333, 556, 556, 500, 556, 556, 278, 556, 556, 222, 222, 500, 222, 833, 556, 556,
    556, 556, 333, 500, 278, 556, 500, 722, 500, 500, 500, 334, 260, 334, 584,
)

_FAMILIES = {"arial": "helvetica", "helvetica": "helvetica", "courier": "courier"}

_CORE_FONTS = {
    ("helvetica", ""): "Helvetica",
    ("helvetica", "B"): "Helvetica-Bold",
    ("helvetica", "I"): "Helvetica-Oblique",
    ("helvetica", "BI"): "Helvetica-BoldOblique",
    ("courier", ""): "Courier",
    ("courier", "B"): "Courier-Bold",
    ("courier", "I"): "Courier-Oblique",
    ("courier", "BI"): "Courier-BoldOblique",
}


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _check_color(r: int, g: int, b: int) -> tuple[int, int, int]:
    for part in (r, g, b):
        if not 0 <= part <= 255:
            raise ValueError(f"colour component out of range: {part}")
    return (r, g, b)


def _rgb(color: tuple[int, int, int]) -> str:
    return " ".join(f"{part / 255:.3f}" for part in color) + " rg"


class PdfDocument:
    """Builds a PDF from text cells laid out top to bottom, in millimetres."""

    left_margin = 10.0
    top_margin = 10.0
    right_margin = 10.0
    bottom_margin = 20.0
    cell_margin = 1.0

    def __init__(self, orientation: str = "P") -> None:
        if orientation.upper() not in ("P", "L"):
            raise ValueError(f"unknown orientation: {orientation}")
        width, height = _PAGE_SIZE_MM
        if orientation.upper() == "L":
            width, height = height, width
        self.page_width = width
        self.page_height = height
        self._pages: list[list[str]] = []
        self._fonts: dict[str, str] = {}
        self._family: str | None = None
        self._style = ""
        self._font_size = 12.0
        self._text_color = (0, 0, 0)
        self._fill_color = (0, 0, 0)
        self._x = self.left_margin
        self._y = self.top_margin
        self._last_height = 0.0

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def add_page(self) -> None:
        """Start a new page and put the cursor at its top-left margin."""
        self._pages.append([])
        self._x = self.left_margin
        self._y = self.top_margin

    def set_font(self, family: str, style: str = "", size: float = 0) -> None:
        """Select a core font; a size of 0 keeps the current size."""
        key = _FAMILIES.get(family.lower())
        if key is None:
            raise ValueError(f"unsupported font family: {family}")
        upper = style.upper()
        if set(upper) - {"B", "I"}:
            raise ValueError(f"unsupported font style: {style}")
        self._family = key
        self._style = ("B" if "B" in upper else "") + ("I" if "I" in upper else "")
        if size:
            self._font_size = float(size)

    def set_text_color(self, r: int, g: int, b: int) -> None:
        self._text_color = _check_color(r, g, b)

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self._fill_color = _check_color(r, g, b)

    def string_width(self, text: str) -> float:
        """Width of the text in millimetres with the current font."""
        if self._family == "courier":
            units = 600 * len(text)
        else:
            units = sum(
                _HELVETICA_WIDTHS[ord(ch) - 32] if 32 <= ord(ch) <= 126 else 556
                for ch in text
            )
        return units * self._font_size / 1000 / _MM

    def _font_resource(self) -> str:
        name = _CORE_FONTS[(self._family, self._style)]
        return self._fonts.setdefault(name, f"F{len(self._fonts) + 1}")

    def cell(
        self,
        width: float,
        height: float,
        text: str = "",
        border: str = "",
        ln: int = 0,
        align: str = "L",
        fill: bool = False,
    ) -> None:
        """Draw one cell at the cursor and move the cursor as ``ln`` says.

        A width of 0 reaches the right margin. ``border`` is "1" for a full
        frame or any of the letters L, T, R, B. ``ln`` is 0 to move right,
        1 to go to the start of the next line and 2 to go straight below.
        """
        if not self._pages:
            raise ValueError("no page has been added")
        if text and self._family is None:
            raise ValueError("no font has been set")
        align = align.upper() or "L"
        if align not in ("L", "C", "R"):
            raise ValueError(f"unknown alignment: {align}")
        if ln not in (0, 1, 2):
            raise ValueError(f"unknown line mode: {ln}")

        if (
            self._y + height > self.page_height - self.bottom_margin
            and self._y > self.top_margin
        ):
            x = self._x
            self.add_page()
            self._x = x

        if width == 0:
            width = self.page_width - self.right_margin - self._x

        ops = self._pages[-1]
        k = _MM
        x0, y0 = self._x * k, (self.page_height - self._y) * k
        rect = f"{x0:.2f} {y0:.2f} {width * k:.2f} {-height * k:.2f} re"
        border = border.upper()
        if fill:
            op = "B" if border == "1" else "f"
            ops.append(f"q {_rgb(self._fill_color)} {rect} {op} Q")
        elif border == "1":
            ops.append(f"{rect} S")
        if border not in ("", "0", "1"):
            x1, y1 = x0 + width * k, y0 - height * k
            lines = {
                "L": (x0, y0, x0, y1),
                "T": (x0, y0, x1, y0),
                "R": (x1, y0, x1, y1),
                "B": (x0, y1, x1, y1),
            }
            for side in border:
                if side not in lines:
                    raise ValueError(f"unknown border: {border}")
                ax, ay, bx, by = lines[side]
                ops.append(f"{ax:.2f} {ay:.2f} m {bx:.2f} {by:.2f} l S")

        if text:
            text_width = self.string_width(text)
            if align == "R":
                dx = width - self.cell_margin - text_width
            elif align == "C":
                dx = (width - text_width) / 2
            else:
                dx = self.cell_margin
            font_size_mm = self._font_size / k
            tx = (self._x + dx) * k
            ty = (self.page_height - (self._y + 0.5 * height + 0.3 * font_size_mm)) * k
            ops.append(
                f"q BT /{self._font_resource()} {self._font_size:.2f} Tf "
                f"{_rgb(self._text_color)} {tx:.2f} {ty:.2f} Td "
                f"({_escape(text)}) Tj ET Q"
            )

        self._last_height = height
        if ln == 0:
            self._x += width
        else:
            self._y += height
            if ln == 1:
                self._x = self.left_margin

    def ln(self, height: float | None = None) -> None:
        """Go to the left margin of the next line; by default one cell lower."""
        self._x = self.left_margin
        self._y += self._last_height if height is None else height

    def output(self) -> bytes:
        """Return the finished document as PDF bytes."""
        if not self._pages:
            raise ValueError("no page has been added")
        font_names = list(self._fonts)
        first_page = 3 + len(font_names)
        kids = " ".join(f"{first_page + 2 * i} 0 R" for i in range(len(self._pages)))
        font_refs = " ".join(
            f"/{self._fonts[name]} {3 + i} 0 R" for i, name in enumerate(font_names)
        )
        width_pt = self.page_width * _MM
        height_pt = self.page_height * _MM

        objects: list[bytes] = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            f"<< /Type /Pages /Kids [{kids}] /Count {len(self._pages)} >>".encode(),
        ]
        for name in font_names:
            objects.append(
                f"<< /Type /Font /Subtype /Type1 /BaseFont /{name} "
                f"/Encoding /WinAnsiEncoding >>".encode()
            )
        for i, ops in enumerate(self._pages):
            content_ref = first_page + 2 * i + 1
            objects.append(
                f"<< /Type /Page /Parent 2 0 R "
                f"/MediaBox [0 0 {width_pt:.2f} {height_pt:.2f}] "
                f"/Resources << /Font << {font_refs} >> >> "
                f"/Contents {content_ref} 0 R >>".encode()
            )
            stream = "\n".join(ops).encode("latin-1", errors="replace")
            objects.append(
                f"<< /Length {len(stream)} >>\nstream\n".encode()
                + stream
                + b"\nendstream"
            )

        out = bytearray(b"%PDF-1.3\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(out))
            out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
        xref_at = len(out)
        out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode()
        for offset in offsets:
            out += f"{offset:010d} 00000 n \n".encode()
        out += (
            f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
            f"startxref\n{xref_at}\n%%EOF\n"
        ).encode()
        return bytes(out)