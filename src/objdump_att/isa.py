'''
tabla de mnemónicos x86-64 (AT&T) -> Opcode, con escape UnknownOpcode
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

# Tabla en orden de inserción; el Enum se construye a partir de ella.
MNEMONICS: Dict[str, str] = {}

def _add(group: str, names: str) -> None:
    for name in names.split():
        MNEMONICS.setdefault(name, group)

def _suffixed(group: str, stems: str, suffixes: str = "bwlq") -> None:
    """Añade cada raíz con sus sufijos AT&T de tamaño (b/w/l/q) y sin sufijo."""
    for stem in stems.split():
        _add(group, stem)
        for s in suffixes:
            _add(group, stem + s)

# Aritmética y lógica entera
_suffixed("alu", "add adc sub sbb and or xor cmp test neg not inc dec mul imul div idiv")
_suffixed("alu", "xadd cmpxchg")
_add("alu", "cmpxchg8b cmpxchg16b")

# Movimientos
_suffixed("mov", "mov xchg")
_add("mov", "movabs movabsb movabsw movabsl movabsq")
_add("mov", "movzbl movzbw movzbq movzwl movzwq movsbl movsbw movsbq movswl movswq movslq")
_add("mov", "movzx movsx movsxd movbe movnti")
_add("mov", "lea leaw leal leaq")
_add("mov", "push pushw pushq pushfq pushf pop popw popq popfq popf")
_add("mov", "cbtw cwtl cltq cwtd cltd cqto")

# Desplazamientos, rotaciones y bits
_suffixed("shift", "shl shr sar sal rol ror rcl rcr")
_add("shift", "shld shldl shldq shrd shrdl shrdq")
_suffixed("bits", "bt bts btr btc bsf bsr", "wlq")
_add("bits", "tzcnt tzcntl tzcntq lzcnt lzcntl lzcntq popcnt popcntl popcntq")
_add("bits", "andn blsi blsr blsmsk bzhi sarx shlx shrx rorx pdep pext bswap")

# Saltos y control de flujo
_add("flow", "jmp jmpq call callq ret retq lret lretl lretq iret iretq")
_add("flow", "jo jno jb jnb jae jnae jc jnc je jz jne jnz jbe jna ja jnbe js jns")
_add("flow", "jp jpe jnp jpo jl jnge jge jnl jle jng jg jnle jcxz jecxz jrcxz")
_add("flow", "loop loope loopne loopz loopnz enter enterq leave leaveq")
_add("flow", "int int3 into syscall sysret sysenter sysexit hlt ud2 ud0 ud1")

# Condicionales (setcc / cmovcc)
_CONDS = "o no b nb ae nae c nc e z ne nz be na a nbe s ns p pe np po l nge ge nl le ng g nle"
for _cc in _CONDS.split():
    _add("cond", "set" + _cc)
    _add("cond", "cmov" + _cc)
    for _s in "wlq":
        _add("cond", "cmov" + _cc + _s)

# Cadenas
_add("string", "movsb movsw movsl movsq cmpsb cmpsw cmpsl cmpsq scasb scasw scasl scasq")
_add("string", "lodsb lodsw lodsl lodsq stosb stosw stosl stosq insb insw insl")
_add("string", "outsb outsw outsl xlat xlatb stos lods scas cmps movs ins outs")

# Banderas
_add("flags", "clc stc cmc cld std cli sti lahf sahf clac stac")

# E/S y sistema
_add("system", "in inb inw inl out outb outw outl cpuid rdtsc rdtscp rdpmc rdmsr wrmsr")
_add("system", "lgdt lidt sgdt sidt lldt sldt ltr str lmsw smsw invlpg wbinvd invd")
_add("system", "swapgs xgetbv xsetbv xsave xrstor xsavec xsaveopt fxsave fxrstor")
_add("system", "rdrand rdseed rdfsbase rdgsbase wrfsbase wrgsbase endbr64 endbr32")
_add("system", "pause nop nopw nopl lfence sfence mfence prefetcht0 prefetcht1")
_add("system", "prefetcht2 prefetchnta prefetchw clflush clflushopt clwb")

# Prefijos que objdump imprime como mnemónico
_add("prefix", "lock rep repe repz repne repnz data16 addr32 rex notrack bnd")
_add("prefix", "cs ds es fs gs ss")

# x87
_add("x87", "fld flds fldl fldt fild filds fildl fildll fst fsts fstl fstp fstps fstpl")
_add("x87", "fstpt fist fistl fistp fistpl fistpll fisttp fisttpl fisttpll")
_add("x87", "fadd fadds faddl faddp fiadd fiadds fiaddl fsub fsubs fsubl fsubp")
_add("x87", "fsubr fsubrs fsubrl fsubrp fisub fisubs fisubl fisubr fmul fmuls fmull")
_add("x87", "fmulp fimul fimuls fimull fdiv fdivs fdivl fdivp fdivr fdivrs fdivrl")
_add("x87", "fdivrp fidiv fidivs fidivl fidivr fcom fcoms fcoml fcomp fcompp fucom")
_add("x87", "fucomp fucompp fucomi fucomip fcomi fcomip fchs fabs fsqrt fxch fld1 fldz")
_add("x87", "fldpi fninit fnstcw fldcw fnstsw fnsave frstor fwait wait fxam ftst")
_add("x87", "frndint fscale fprem fprem1 fsin fcos fsincos fptan fpatan f2xm1 fyl2x")
_add("x87", "fcmovb fcmove fcmovbe fcmovu fcmovnb fcmovne fcmovnbe fcmovnu ffree")

# SSE / SSE2 (escalares y empaquetadas)
_add("sse", "movd movq movss movsd movaps movapd movups movupd movdqa movdqu movhps")
_add("sse", "movhpd movlps movlpd movhlps movlhps movmskps movmskpd movntdq movntps")
_add("sse", "movntpd movntdqa movddup movshdup movsldup lddqu maskmovdqu")
_add("sse", "addss addsd addps addpd subss subsd subps subpd mulss mulsd mulps mulpd")
_add("sse", "divss divsd divps divpd sqrtss sqrtsd sqrtps sqrtpd minss minsd minps")
_add("sse", "minpd maxss maxsd maxps maxpd rcpss rcpps rsqrtss rsqrtps")
_add("sse", "andps andpd andnps andnpd orps orpd xorps xorpd")
_add("sse", "cmpss cmpsd cmpps cmppd cmpeqss cmpeqsd cmpltss cmpltsd cmpless cmplesd")
_add("sse", "cmpneqss cmpneqsd cmpunordss cmpunordsd comiss comisd ucomiss ucomisd")
_add("sse", "cvtsi2ss cvtsi2sd cvtsi2ssl cvtsi2sdl cvtsi2ssq cvtsi2sdq cvtss2sd")
_add("sse", "cvtsd2ss cvttss2si cvttsd2si cvtss2si cvtsd2si cvtdq2ps cvtdq2pd")
_add("sse", "cvtps2dq cvtpd2dq cvttps2dq cvttpd2dq cvtps2pd cvtpd2ps")
_add("sse", "shufps shufpd unpcklps unpcklpd unpckhps unpckhpd")
_add("sse", "pand pandn por pxor paddb paddw paddd paddq paddsb paddsw paddusb paddusw")
_add("sse", "psubb psubw psubd psubq psubsb psubsw psubusb psubusw pmullw pmulhw")
_add("sse", "pmulhuw pmuludq pmaddwd psadbw pavgb pavgw pmaxub pmaxsw pminub pminsw")
_add("sse", "pcmpeqb pcmpeqw pcmpeqd pcmpgtb pcmpgtw pcmpgtd pmovmskb")
_add("sse", "psllw pslld psllq pslldq psrlw psrld psrlq psrldq psraw psrad")
_add("sse", "punpcklbw punpcklwd punpckldq punpcklqdq punpckhbw punpckhwd punpckhdq")
_add("sse", "punpckhqdq packsswb packssdw packuswb pshufd pshuflw pshufhw")
_add("sse", "pinsrw pextrw")

# SSSE3 / SSE4
_add("sse4", "pshufb palignr pabsb pabsw pabsd phaddw phaddd phsubw phsubd pmulhrsw")
_add("sse4", "pmaddubsw psignb psignw psignd")
_add("sse4", "pinsrb pinsrd pinsrq pextrb pextrd pextrq insertps extractps ptest")
_add("sse4", "pcmpeqq pcmpgtq pminsb pminsd pminuw pminud pmaxsb pmaxsd pmaxuw pmaxud")
_add("sse4", "pmulld pmuldq packusdw pblendw pblendvb blendps blendpd blendvps blendvpd")
_add("sse4", "roundss roundsd roundps roundpd dpps dppd mpsadbw phminposuw")
_add("sse4", "pmovzxbw pmovzxbd pmovzxbq pmovzxwd pmovzxwq pmovzxdq")
_add("sse4", "pmovsxbw pmovsxbd pmovsxbq pmovsxwd pmovsxwq pmovsxdq")
_add("sse4", "pcmpestri pcmpestrm pcmpistri pcmpistrm crc32 crc32b crc32w crc32l crc32q")
_add("sse4", "aesenc aesenclast aesdec aesdeclast aesimc aeskeygenassist pclmulqdq")

# AVX / AVX2
_add("avx", "vmovd vmovq vmovss vmovsd vmovaps vmovapd vmovups vmovupd vmovdqa vmovdqu")
_add("avx", "vmovdqa64 vmovdqu8 vmovdqu64 vmovntdq vmovntdqa")
_add("avx", "vaddss vaddsd vaddps vaddpd vsubss vsubsd vsubps vsubpd vmulss vmulsd")
_add("avx", "vmulps vmulpd vdivss vdivsd vdivps vdivpd vsqrtss vsqrtsd vminss vmaxss")
_add("avx", "vandps vandpd vandnps vorps vxorps vxorpd vucomiss vucomisd")
_add("avx", "vcvtsi2ss vcvtsi2sd vcvtss2sd vcvtsd2ss vcvttss2si vcvttsd2si")
_add("avx", "vfmadd132ss vfmadd213ss vfmadd231ss vfmadd132sd vfmadd213sd vfmadd231sd")
_add("avx", "vpand vpandn vpor vpxor vpaddb vpaddw vpaddd vpaddq vpsubb vpsubd")
_add("avx", "vpcmpeqb vpcmpeqd vpcmpgtb vpmovmskb vpminub vptest vpshufb vpshufd")
_add("avx", "vpbroadcastb vpbroadcastd vpbroadcastq vbroadcastss vbroadcastsd")
_add("avx", "vpunpcklbw vpunpcklqdq vpalignr vpslldq vpsrldq vpermq vperm2i128")
_add("avx", "vinserti128 vextracti128 vinsertf128 vextractf128 vzeroupper vzeroall")
_add("avx", "vpternlogd vpcmpb vpcmpub kmovd kmovq kortestd kortestq")

# Mnemónico reconocido: el nombre del miembro es el mnemónico en mayúsculas y el
# valor el texto exacto que imprime objdump (Opcode.MOVQ.value == "movq").
Opcode = Enum("Opcode", [(m.upper(), m) for m in MNEMONICS], module=__name__)

@dataclass(frozen=True)
class UnknownOpcode:
    """Mnemónico fuera de la tabla. No es un error: es la entrada del descubrimiento de opcodes."""
    name: str

OpcodeLike = Union[Opcode, UnknownOpcode]

_BY_MNEMONIC: Dict[str, Opcode] = {op.value: op for op in Opcode}

def opcode_of(mnemonic: str) -> OpcodeLike:
    """Búsqueda exacta y sensible a mayúsculas; 'movq' y 'mov' son claves distintas."""
    op = _BY_MNEMONIC.get(mnemonic)
    if op is None:
        return UnknownOpcode(mnemonic)
    return op
