import pytest
from objdump_att.parser import parse_line, parse_instruction
from objdump_att.ast import (
    Reg, Imm, Addr, Instruction, InstructionLine, DataLine, OtherLine, BlankLine,
)
from objdump_att.isa import Opcode, UnknownOpcode
from objdump_att.regs import Register
from objdump_att.diagnostics import MalformedInteger, MalformedAddressExpression, EmptyInput

# --- instrucciones ---

def test_instruction_two_field_layout():
    p = parse_line("401000: 48 89 e5\tmovq %rsp, %rbp")
    assert isinstance(p, InstructionLine)
    assert p.address == 0x401000
    assert p.bytes == b"\x48\x89\xe5"
    assert p.instruction == Instruction(Opcode.MOVQ, [Reg(Register.RSP), Reg(Register.RBP)], "")

def test_instruction_native_objdump_layout():
    p = parse_line("  401126:\t48 8b 45 f8          \tmov    -0x8(%rbp,%rax,4),%rax")
    assert p.address == 0x401126
    assert p.bytes == bytes([0x48, 0x8b, 0x45, 0xf8])
    ins = p.instruction
    assert ins.opcode is Opcode.MOV
    assert ins.operands == [
        Addr(0xFFFFFFFFFFFFFFF8, Reg(Register.RBP), Reg(Register.RAX), 4),
        Reg(Register.RAX),
    ]

def test_trailing_symbol_and_comment():
    p = parse_line("401030:\tcallq <memcpy> extra   # 0x404018")
    assert p.instruction.opcode is Opcode.CALLQ
    assert p.instruction.operands == []
    assert p.instruction.trailing_symbol == "<memcpy>"

def test_branch_arrow_decoration_is_skipped():
    p = parse_line(" --> 4010a0: c3\tretq")
    assert p.address == 0x4010a0
    assert p.bytes == b"\xc3"
    assert p.instruction.opcode is Opcode.RETQ

def test_unknown_mnemonic_is_not_an_error():
    p = parse_line("10: 0f 0b\tfrobnicate $0x1")
    assert p.instruction.opcode == UnknownOpcode("frobnicate")
    assert p.instruction.mnemonic == "frobnicate"
    assert p.instruction.operands == [Imm(1)]

@pytest.mark.parametrize("h", ["0", "a", "401000", "DEADBEEF", "ffffffffffffffff", "0123456789abcdef"])
def test_any_hex_address_classifies_as_instruction(h):
    p = parse_line(h + ":" + "\t" + "90")
    assert isinstance(p, InstructionLine)
    assert p.address == int(h, 16)
    assert p.bytes == b""
    assert p.instruction.opcode == UnknownOpcode("90")

def test_instruction_errors():
    with pytest.raises(MalformedInteger):
        parse_line("401000: 4g\tnop")
    with pytest.raises(MalformedInteger):
        parse_line("401000: 123\tnop")
    with pytest.raises(MalformedAddressExpression):
        parse_line("401000: e8\tcallq 401020 <foo>")
    with pytest.raises(EmptyInput):
        parse_line("401000: 90")
    with pytest.raises(EmptyInput):
        parse_line("401000: 90\t   ")

def test_parse_instruction_empty():
    with pytest.raises(EmptyInput):
        parse_instruction("")

@pytest.mark.parametrize("text", [
    "mov %rsp,%rbp",
    "mov %rsp, %rbp",
    "mov %rsp ,%rbp",
    "mov   %rsp ,  %rbp",
])
def test_parse_instruction_splits_on_commas(text):
    # las comas separan operandos con o sin espacios alrededor
    assert parse_instruction(text).operands == [Reg(Register.RSP), Reg(Register.RBP)]

def test_parse_instruction_keeps_address_commas():
    ins = parse_instruction("lea 0x8(%rax,%rbx,2), %rcx")
    assert ins.operands == [Addr(8, Reg(Register.RAX), Reg(Register.RBX), 2), Reg(Register.RCX)]

# --- datos ---

@pytest.mark.parametrize("h", ["0000000000000000", "0000000000401000", "ffffffffffffffff", "0123456789ABCDEF"])
def test_data_line(h):
    assert parse_line(h + " " + "deadbeef") == DataLine(int(h, 16), "deadbeef")

def test_data_words_joined_with_single_space():
    assert parse_line("0000000000402000   01000200  6c6f6f70") == DataLine(0x402000, "01000200 6c6f6f70")
    assert parse_line("0000000000401000 <main>:") == DataLine(0x401000, "<main>:")

def test_data_line_with_overlong_address_is_malformed():
    with pytest.raises(MalformedInteger):
        parse_line("0000000000401000z deadbeef")

# --- otras / vacías ---

@pytest.mark.parametrize("line", [
    "/bin/ls:     file format elf64-x86-64",
    "Disassembly of section .text:",
    "\tnop",
    "   ...",
])
def test_other_keeps_text(line):
    assert parse_line(line) == OtherLine(line)

def test_other_text_is_comment_stripped():
    assert parse_line("hello world # note") == OtherLine("hello world ")

@pytest.mark.parametrize("line", ["", "   ", "\t", "# only", "   # just a comment", " \t # x"])
def test_blank(line):
    assert parse_line(line) == BlankLine()

def test_parse_is_idempotent():
    line = "  401126:\t48 8b 45 f8\tmov    -0x8(%rbp,%rax,4),%rax"
    assert parse_line(line) == parse_line(line)
