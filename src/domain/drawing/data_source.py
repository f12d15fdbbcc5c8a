"""Category and value data sources for chart series.

``AxDataSource`` writes the labels of a series (``c:cat`` / ``c:xVal``),
``NumDataSource`` its values (``c:val`` / ``c:yVal`` / ``c:bubbleSize``).

With a worksheet reference the cached form is written::

    <c:val><c:numRef><c:f>Sheet1!$B$2:$B$4</c:f><c:numCache>...</c:numCache></c:numRef></c:val>

Without one, the values are embedded as a literal (``c:numLit`` / ``c:strLit``).
"""

from __future__ import annotations

import math
from io import StringIO
from typing import Any, List, Optional, Sequence
from xml.sax.saxutils import escape

from .errors import TypeMismatchError
from .options import LineSeriesOptions
from .validators import validate_choice, validate_type

DEFAULT_FORMAT_CODE = "General"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Any) -> Optional[str]:
    # Blank and non-finite points are counted but not written
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        return None
    return repr(value) if isinstance(value, float) else str(value)


def _write_points(buffer: StringIO, values: Sequence[Optional[str]]) -> None:
    buffer.write(f'<c:ptCount val="{len(values)}"/>')
    for idx, value in enumerate(values):
        if value is None:
            continue
        buffer.write(f'<c:pt idx="{idx}"><c:v>{escape(value)}</c:v></c:pt>')


def write_num_data(buffer: StringIO, tag: str, values: Sequence[Any], format_code: str) -> None:
    """Write a ``c:numCache`` or ``c:numLit`` block."""
    buffer.write(f"<c:{tag}>")
    buffer.write(f"<c:formatCode>{escape(format_code)}</c:formatCode>")
    _write_points(buffer, [_format_number(v) for v in values])
    buffer.write(f"</c:{tag}>")


def write_str_data(buffer: StringIO, tag: str, values: Sequence[Any]) -> None:
    """Write a ``c:strCache`` or ``c:strLit`` block."""
    buffer.write(f"<c:{tag}>")
    _write_points(buffer, [None if v is None else str(v) for v in values])
    buffer.write(f"</c:{tag}>")


def _validate_points(name: str, values: Any, allow_text: bool) -> List[Any]:
    validate_type(name, (list, tuple), values)
    allowed = (str, int, float) if allow_text else (int, float)
    for value in values:
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, allowed):
            raise TypeMismatchError(f"{name}[]", allowed, value)
    return list(values)


class _DataSource:
    TAG_NAMES: tuple[str, ...] = ()

    def __init__(self, data: Sequence[Any], ref: Optional[str] = None, tag_name: Optional[str] = None) -> None:
        self._data: List[Any] = []
        self._ref: Optional[str] = None
        self._tag_name = self.TAG_NAMES[0]
        self.data = data
        self.ref = ref
        if tag_name is not None:
            self.tag_name = tag_name

    @property
    def ref(self) -> Optional[str]:
        return self._ref

    @ref.setter
    def ref(self, value: Optional[str]) -> None:
        if value is not None:
            validate_type(f"{type(self).__name__}.ref", (str,), value)
        self._ref = value

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @tag_name.setter
    def tag_name(self, value: str) -> None:
        self._tag_name = validate_choice(f"{type(self).__name__}.tag_name", self.TAG_NAMES, value)

    def __len__(self) -> int:
        return len(self._data)

    def to_xml(self) -> str:
        return self.serialize().getvalue()

    def serialize(self, buffer: Optional[StringIO] = None) -> StringIO:
        raise NotImplementedError


class AxDataSource(_DataSource):
    """Category labels of a series."""

    TAG_NAMES = ("cat", "xVal")

    @property
    def data(self) -> List[Any]:
        return self._data

    @data.setter
    def data(self, value: Sequence[Any]) -> None:
        self._data = _validate_points("AxDataSource.data", value, allow_text=True)

    @property
    def numeric(self) -> bool:
        """True when every present label is a number; such labels get a number cache."""
        present = [v for v in self._data if v is not None]
        return bool(present) and all(_is_number(v) for v in present)

    def serialize(self, buffer: Optional[StringIO] = None) -> StringIO:
        buffer = buffer if buffer is not None else StringIO()
        buffer.write(f"<c:{self.tag_name}>")
        if self.numeric:
            if self.ref is not None:
                buffer.write(f"<c:numRef><c:f>{escape(self.ref)}</c:f>")
                write_num_data(buffer, "numCache", self._data, DEFAULT_FORMAT_CODE)
                buffer.write("</c:numRef>")
            else:
                write_num_data(buffer, "numLit", self._data, DEFAULT_FORMAT_CODE)
        elif self.ref is not None:
            buffer.write(f"<c:strRef><c:f>{escape(self.ref)}</c:f>")
            write_str_data(buffer, "strCache", self._data)
            buffer.write("</c:strRef>")
        else:
            write_str_data(buffer, "strLit", self._data)
        buffer.write(f"</c:{self.tag_name}>")
        return buffer


class NumDataSource(_DataSource):
    """Numeric values of a series."""

    TAG_NAMES = ("val", "yVal", "bubbleSize")

    def __init__(
        self,
        data: Sequence[Any],
        ref: Optional[str] = None,
        tag_name: Optional[str] = None,
        format_code: str = DEFAULT_FORMAT_CODE,
    ) -> None:
        super().__init__(data, ref, tag_name)
        self.format_code = validate_type("NumDataSource.format_code", (str,), format_code)

    @classmethod
    def from_options(cls, options: LineSeriesOptions) -> "NumDataSource":
        return cls(options.data if options.data is not None else [], ref=options.data_ref, format_code=options.format_code)

    @property
    def data(self) -> List[Any]:
        return self._data

    @data.setter
    def data(self, value: Sequence[Any]) -> None:
        self._data = _validate_points("NumDataSource.data", value, allow_text=False)

    def serialize(self, buffer: Optional[StringIO] = None) -> StringIO:
        buffer = buffer if buffer is not None else StringIO()
        buffer.write(f"<c:{self.tag_name}>")
        if self.ref is not None:
            buffer.write(f"<c:numRef><c:f>{escape(self.ref)}</c:f>")
            write_num_data(buffer, "numCache", self._data, self.format_code)
            buffer.write("</c:numRef>")
        else:
            write_num_data(buffer, "numLit", self._data, self.format_code)
        buffer.write(f"</c:{self.tag_name}>")
        return buffer
