"""Shared fixtures for sankeyplot tests."""

import re
import xml.etree.ElementTree as ET

import pytest

from sankeyplot import Link, Node, TextMetrics

SVG_NS = "{http://www.w3.org/2000/svg}"
NUMBER = re.compile(r"-?\d+(?:\.\d+)?(?:e-?\d+)?")


class FixedWidthMeasurer:
    """Measures every character as the same width, independent of installed fonts."""

    def __init__(self, char_width=6.0):
        self.char_width = char_width
        self.calls = []

    def measure(self, text, family, size, weight="normal"):
        self.calls.append((text, family, size, weight))
        return TextMetrics(width=len(text) * self.char_width, height=size * 1.2, ascent=size)


def parse_svg(svg):
    return ET.fromstring(svg)


def elements(root, tag):
    return list(root.iter(f"{SVG_NS}{tag}"))


def path_numbers(path):
    return [float(n) for n in NUMBER.findall(path.get("d"))]


@pytest.fixture
def measurer():
    return FixedWidthMeasurer()


@pytest.fixture
def red_blue_nodes():
    return [
        Node(1, 0, 0, 10, 10, label="X"),
        Node(2, 100, 0, 110, 10, label="Y"),
    ]


@pytest.fixture
def red_blue_links():
    return [Link(source=1, target=2, y0=5, y1=5, width=4)]


@pytest.fixture
def red_blue_colors():
    return {"X": "red", "Y": "blue"}
