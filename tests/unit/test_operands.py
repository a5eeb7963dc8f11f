import pytest
from objdump_att.parser import parse_operand, parse_address
from objdump_att.ast import Reg, Imm, Addr
from objdump_att.regs import Register, UnknownRegister
from objdump_att.diagnostics import MalformedAddressExpression, MalformedInteger

def test_register_operand_never_fails():
    assert parse_operand("%rax") == Reg(Register.RAX)
    assert parse_operand("%xmm0") == Reg(UnknownRegister("%xmm0"))
    assert parse_operand("%fs:0x28") == Reg(UnknownRegister("%fs:0x28"))

def test_immediate_operand():
    assert parse_operand("$0x2a") == Imm(42)
    with pytest.raises(MalformedInteger):
        parse_operand("$0xzz")

def test_negative_displacement_keeps_bit_pattern():
    # el desplazamiento negativo se guarda como patrón u64 (complemento a dos)
    a = parse_operand("-0x8(%rbp,%rax,4)")
    assert a == Addr(displacement=0xFFFFFFFFFFFFFFF8, base=Reg(Register.RBP),
                     index=Reg(Register.RAX), scale=4)

def test_no_displacement_no_scale():
    assert parse_address("(%rax,%rbx)") == Addr(None, Reg(Register.RAX), Reg(Register.RBX), None)

def test_no_base():
    a = parse_address("(,%rax,1)")
    assert a.base is None
    assert a.index == Reg(Register.RAX)
    assert a.scale == 1
    assert a.displacement is None

def test_bare_registers_and_immediates_inside_parens():
    a = parse_address("0x10(rsi,$0x4,8)")
    assert a.displacement == 0x10
    assert a.base == Reg(Register.RSI)
    assert a.index == Imm(4)
    assert a.scale == 8

def test_empty_scale_is_absent():
    assert parse_address("(%rax,%rbx,)").scale is None

def test_unknown_register_inside_address():
    a = parse_address("0x2fe1(%rip,%rax)")
    assert a.base == Reg(UnknownRegister("%rip"))

@pytest.mark.parametrize("tok", [
    "(%rax",            # '(' sin cerrar
    "foo",              # sin '('
    "401000",           # objetivo de salto desnudo
    "(%rax)",           # falta INDEX
    "0x8(%rbp)",
    "(%rax,)",
    "(%rax,%rbx,4,5)",
    "((%rax,%rbx))",
    "(%rax,%rbx)junk",
    "*%rax",
])
def test_malformed_address(tok):
    with pytest.raises(MalformedAddressExpression):
        parse_operand(tok)

@pytest.mark.parametrize("tok", ["zz(%rax,%rbx)", "(%rax,%rbx,x)", "(%rax,$q,1)"])
def test_malformed_integer_inside_address(tok):
    with pytest.raises(MalformedInteger):
        parse_operand(tok)
