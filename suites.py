# suites.py
from typing import Dict

Alpha26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Wheel wirings are written as cycles; "M<notches>" marks a pawled rotor,
# "N" a fixed rotor and "R" a reflector.

_ROTORS_I_TO_V = """\
I     MQ   (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
II    ME   (FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)
III   MV   (ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)
IV    MJ   (AEPLIYWCOXMRFZBSTGJQNH) (DV) (KU)
V     MZ   (AVOLDRWFIUQ)(BZKSMNHYC) (EGTJPX)
"""

# Enigma I / M3: three pawled rotors behind a wide reflector
ENIGMA_M3 = f"""\
{Alpha26}
4 3
{_ROTORS_I_TO_V}\
A     R    (AE) (BJ) (CM) (DZ) (FL) (GY) (HX) (IV) (KW) (NR)
           (OQ) (PU) (ST)
B     R    (AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN)
           (MO) (TZ) (VW)
C     R    (AF) (BV) (CP) (DJ) (EI) (GO) (HY) (KR) (LZ) (MX)
           (NW) (QT) (SU)
"""

# Kriegsmarine M4: thin reflector, fixed Greek wheel, three pawled rotors
ENIGMA_M4 = f"""\
{Alpha26}
5 3
{_ROTORS_I_TO_V}\
VI    MZM  (AJQDVLEOZWIYTS) (CGMNHFUX) (BPRK)
VII   MZM  (ANOUPFRIMBZTLWKSVEGCJYDHXQ)
VIII  MZM  (AFLSETWUNDHOZVICQ) (BKJ) (GXY) (MPR)
Beta  N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
Gamma N    (AFNIRLBSQWVXGUZDKMTPCOYJHE)
B     R    (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP)
           (RX) (SZ) (TV)
C     R    (AR) (BD) (CO) (EJ) (FN) (GT) (HK) (IV) (LM) (PW)
           (QZ) (SX) (UY)
"""

SUITES: Dict[str, Dict[str, str]] = {
    "M3": {"name": "Enigma I / M3", "conf": ENIGMA_M3},
    "M4": {"name": "Enigma M4",     "conf": ENIGMA_M4},
}

DEFAULT_SUITE = "M4"
