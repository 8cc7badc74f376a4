"""
Built-in RIS documentation catalog.

RIS is an extended assembly-like language for OS development. The example
programs below are shown verbatim; nothing in this package executes them.
"""

from .catalog import Catalog
from .models import (
    BulletList,
    CodeBlock,
    Group,
    Heading,
    OrderedList,
    Paragraph,
    Section,
)

DEFAULT_SECTION_ID = "overview"

EXAMPLE_PROGRAMS = {
    "bootloader": """VAR BOOT_MSG >> Initializing RIS OS...
PRN $BOOT_MSG
MEM SIZE
PROC CREATE init
SYS DIR
INT 0
HLT""",
    "shell": """VAR PROMPT >> RIS>
:loop
PRN $PROMPT
VAR cmd <<
PROC CREATE shell
SYS DIR
INT 0
GOTO loop
HLT""",
    "memory_manager": """MEM WRITE 0 255
MEM WRITE 1 128
MEM READ 0
MEM READ 1
INT 1
HLT""",
    "process_manager": """PROC CREATE main
PROC CREATE worker1
PROC CREATE worker2
PROC LIST
PROC KILL 2
PROC LIST
HLT""",
}


OVERVIEW = Section(
    id="overview",
    title="Overview",
    icon="book",
    body=(
        Paragraph(
            "RIS is an extended assembly-like language designed for OS development "
            "with support for memory management, process control, file operations, "
            "and system interrupts."
        ),
        Heading("Key Features"),
        BulletList((
            "Memory management with 1MB default space",
            "Process creation and control",
            "File system operations",
            "System interrupts",
            "Error handling",
        )),
    ),
)

BASIC = Section(
    id="basic",
    title="Basic Instructions",
    icon="terminal",
    body=(
        Heading("PRN - Print output"),
        CodeBlock(
            "PRN message     ; Print direct message\n"
            "PRN $variable   ; Print variable content"
        ),
        Heading("VAR - Variable operations"),
        CodeBlock(
            "VAR name >> value   ; Set variable\n"
            "VAR name <<         ; Get input from user"
        ),
        Heading("HLT - Stop execution"),
        CodeBlock("HLT               ; End program"),
    ),
)

MEMORY = Section(
    id="memory",
    title="Memory Management",
    icon="cpu",
    body=(
        Heading("MEM - Memory operations"),
        CodeBlock(
            "MEM READ address    ; Read from memory address\n"
            "MEM WRITE address value  ; Write to memory address\n"
            "MEM SIZE            ; Display memory size"
        ),
    ),
)

EXAMPLES = Section(
    id="examples",
    title="Examples",
    icon="file-code",
    body=(
        Group((CodeBlock(EXAMPLE_PROGRAMS["bootloader"]),), title="Simple Bootloader"),
        Group((CodeBlock(EXAMPLE_PROGRAMS["shell"]),), title="Basic Shell"),
        Group((CodeBlock(EXAMPLE_PROGRAMS["memory_manager"]),), title="Memory Manager"),
        Group((CodeBlock(EXAMPLE_PROGRAMS["process_manager"]),), title="Process Manager"),
    ),
)

ERROR_HANDLING = Section(
    id="errorHandling",
    title="Error Handling",
    icon="alert-triangle",
    body=(
        Paragraph("The RIS interpreter includes comprehensive error checking for:"),
        BulletList((
            "Invalid memory access attempts",
            "Process management errors",
            "File operation failures",
            "System command errors",
            "Invalid interrupt numbers",
        )),
    ),
)

SETUP = Section(
    id="setup",
    title="Setup Guide",
    icon="code",
    body=(
        Heading("Visual Studio 2022"),
        OrderedList((
            "Create new C++ project",
            "Set C++17 or later",
            "Include required headers",
            "Build solution",
        )),
        Heading("VSCode"),
        OrderedList((
            "Install C/C++ extension",
            "Configure c_cpp_properties.json for C++17",
            "Set up build tasks",
            "Configure debugging",
        )),
        Heading("Compilation"),
        CodeBlock("g++ -std=c++17 ris.cpp -o ris"),
        Heading("Running"),
        CodeBlock("./ris program.ris"),
    ),
)

DEFAULT_SECTIONS = (OVERVIEW, BASIC, MEMORY, EXAMPLES, ERROR_HANDLING, SETUP)


def build_default_catalog() -> Catalog:
    """The built-in RIS documentation, in navigation order."""
    return Catalog(DEFAULT_SECTIONS)
