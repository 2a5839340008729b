"""Buffer that simplifies the generation of Ruby source files.

The buffer keeps the requires separate from the body, so that requires can be
added on demand while the body is being generated. Blocks can be opened and
closed explicitly with ``block()`` and ``module()``, which is what the
generators use. ``add_line()`` instead guesses the indentation from the text
of the line, and gets confused by strings that happen to look like the
beginning or end of a block.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)

MODULE_SEPARATOR = '::'
FILE_EXTENSION = '.rb'
INDENT = '  '

LICENSE_HEADER = [
    "#--",
    "# Copyright (c) 2015-2016 Red Hat, Inc.",
    "#",
    '# Licensed under the Apache License, Version 2.0 (the "License");',
    "# you may not use this file except in compliance with the License.",
    "# You may obtain a copy of the License at",
    "#",
    "#   http://www.apache.org/licenses/LICENSE-2.0",
    "#",
    "# Unless required by applicable law or agreed to in writing, software",
    '# distributed under the License is distributed on an "AS IS" BASIS,',
    "# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.",
    "# See the License for the specific language governing permissions and",
    "# limitations under the License.",
    "#++",
]

# Lines that start a block, recognized by add_line():
BEGIN_SUFFIXES = ('(', '[', '|')
BEGIN_LINES = frozenset({'begin', 'else', 'ensure'})
BEGIN_PREFIXES = (
    'case ', 'class ', 'def ', 'if ', 'loop ', 'module ', 'unless ', 'when ', 'while ',
)

# Lines that end a block, recognized by add_line():
END_LINES = frozenset({')', ']', 'else', 'end', 'ensure'})
END_PREFIXES = ('when ',)


def is_block_begin(line: str) -> bool:
    return line.endswith(BEGIN_SUFFIXES) or line in BEGIN_LINES or line.startswith(BEGIN_PREFIXES)


def is_block_end(line: str) -> bool:
    return line in END_LINES or line.startswith(END_PREFIXES)


class RubyBuffer:
    """Accumulates the lines of one Ruby source file"""

    def __init__(self, file_name: str = ""):
        self.file_name = file_name
        self.requires: set[str] = set()
        self.module_stack: list[str] = []
        self.lines: list[str] = []
        self.level = 0

    def add_require(self, name: str):
        self.requires.add(name)

    def begin_module(self, module_name: str):
        """Writes one ``module`` statement per component of ``A::B::C``"""
        for component in module_name.split(MODULE_SEPARATOR):
            self.write("module %s", component)
            self.module_stack.append(component)
            self.level += 1

    def end_module(self, module_name: str):
        """Writes one ``end`` statement per component of ``A::B::C``"""
        for _ in module_name.split(MODULE_SEPARATOR):
            self._dedent()
            self.write("end")
            self.module_stack.pop()

    @contextmanager
    def module(self, module_name: str) -> Iterator['RubyBuffer']:
        self.begin_module(module_name)
        try:
            yield self
        finally:
            self.end_module(module_name)

    @contextmanager
    def block(self, header: str, *args, closer: str = "end") -> Iterator['RubyBuffer']:
        """Writes ``header``, indents the lines written inside, then writes ``closer``"""
        self.write(header, *args)
        self.level += 1
        try:
            yield self
        finally:
            self._dedent()
            self.write(closer)

    def write(self, line: str = "", *args):
        """Adds a line at the current indentation, without looking at its content"""
        if args:
            line = line % args
        self.lines.append(INDENT * self.level + line if line else line)

    def add_line(self, line: str = "", *args):
        """Adds a line, adjusting the indentation if it looks like the start or end of a block"""
        if args:
            line = line % args
        if is_block_end(line):
            self._dedent()
        self.write(line)
        if is_block_begin(line):
            self.level += 1

    def _dedent(self):
        if self.level > 0:
            self.level -= 1

    def render(self) -> str:
        """Complete source code of the file"""
        parts = [line + "\n" for line in LICENSE_HEADER]
        parts.append("\n")
        parts.extend(f"require '{name}'\n" for name in sorted(self.requires))
        parts.append("\n")
        parts.extend(line + "\n" for line in self.lines)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def file_path(self, directory: Union[str, Path]) -> Path:
        return Path(directory, *f"{self.file_name}{FILE_EXTENSION}".split("/"))

    def persist(self, directory: Union[str, Path]) -> Path:
        """Writes the file below ``directory``, creating missing directories"""
        path = self.file_path(directory)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info('Writing file "%s".', path.absolute())
        path.write_text(self.render(), encoding="utf-8")
        return path
