"""
English letter-to-sound rules.

Derived from:

     AUTOMATIC TRANSLATION OF ENGLISH TEXT TO PHONETICS
            BY MEANS OF LETTER-TO-SOUND RULES

                NRL Report 7948, January 21st, 1976
        Naval Research Laboratory, Washington, D.C.

Published by the National Technical Information Service as
document "AD/A021 929".

Each rule is (left context, text to match, right context, phonemes).
Rules are grouped in buckets keyed by the first letter of the match
text; order inside a bucket is priority. The last entry of every
bucket is the catch-all whose match text is UNKNOWN.

Context symbols:

    #   one or more vowels
    :   zero or more consonants
    ^   one consonant
    .   one of B, D, V, G, J, L, M, N, R, W or Z (voiced consonants)
    %   one of ER, E, ES, ED, ING, ELY (a suffix; right context only)
    +   one of E, I or Y (a "front" vowel)
"""

from typing import List, Tuple

from .phonemes import (
    AA, AE, AH, AO, AW, AX, AY, B, CH, D, DH, EH, ER, EY, F, G, HH,
    IH, IY, JH, K, L, M, N, NG, OW, OY, P, PAUSE, R, S, SH, SILENT,
    T, TH, UH, UW, V, W, WH, Y, Z, ZH, UNKNOWN,
)

RawRule = Tuple[str, str, str, List[str]]
RawBucket = List[RawRule]

ANYTHING = ""   # no context requirement
NOTHING = " "   # beginning or end of word

# ── Punctuation and whitespace ──────────────────────────────────────
PUNCT_RULES: RawBucket = [
    (ANYTHING, " ", ANYTHING, [PAUSE]),
    (ANYTHING, "-", ANYTHING, [SILENT]),
    (".", "'S", ANYTHING, [Z]),
    ("#:.E", "'S", ANYTHING, [Z]),
    ("#", "'S", ANYTHING, [Z]),
    (ANYTHING, "'", ANYTHING, [SILENT]),
    (ANYTHING, ",", ANYTHING, [PAUSE]),
    (ANYTHING, ".", ANYTHING, [PAUSE]),
    (ANYTHING, "?", ANYTHING, [PAUSE]),
    (ANYTHING, "!", ANYTHING, [PAUSE]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── A ──
A_RULES: RawBucket = [
    (ANYTHING, "A", NOTHING, [AX]),
    (NOTHING, "ARE", NOTHING, [AA, R]),
    (NOTHING, "AR", "O", [AX, R]),
    (ANYTHING, "AR", "#", [EH, R]),
    ("^", "AS", "#", [EY, S]),
    (ANYTHING, "A", "WA", [AX]),
    (ANYTHING, "AW", ANYTHING, [AO]),
    (" :", "ANY", ANYTHING, [EH, N, IY]),
    (ANYTHING, "A", "^+#", [EY]),
    ("#:", "ALLY", ANYTHING, [AX, L, IY]),
    (NOTHING, "AL", "#", [AX, L]),
    (ANYTHING, "AGAIN", ANYTHING, [AX, G, EH, N]),
    ("#:", "AG", "E", [IH, JH]),
    (ANYTHING, "A", "^+:#", [AE]),
    (" :", "A", "^+ ", [EY]),
    (ANYTHING, "A", "^%", [EY]),
    (NOTHING, "ARR", ANYTHING, [AX, R]),
    (ANYTHING, "ARR", ANYTHING, [AE, R]),
    (" :", "AR", NOTHING, [AA, R]),
    (ANYTHING, "AR", NOTHING, [ER]),
    (ANYTHING, "AR", ANYTHING, [AA, R]),
    (ANYTHING, "AIR", ANYTHING, [EH, R]),
    (ANYTHING, "AI", ANYTHING, [EY]),
    (ANYTHING, "AY", ANYTHING, [EY]),
    (ANYTHING, "AU", ANYTHING, [AO]),
    ("#:", "AL", NOTHING, [AX, L]),
    ("#:", "ALS", NOTHING, [AX, L, Z]),
    (ANYTHING, "ALK", ANYTHING, [AO, K]),
    (ANYTHING, "AL", "^", [AO, L]),
    (" :", "ABLE", ANYTHING, [EY, B, AX, L]),
    (ANYTHING, "ABLE", ANYTHING, [AX, B, AX, L]),
    (ANYTHING, "ANG", "+", [EY, N, JH]),
    (ANYTHING, "A", ANYTHING, [AE]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── B ──
B_RULES: RawBucket = [
    (NOTHING, "BE", "^#", [B, IH]),
    (ANYTHING, "BEING", ANYTHING, [B, IY, IH, NG]),
    (NOTHING, "BOTH", NOTHING, [B, OW, TH]),
    (NOTHING, "BUS", "#", [B, IH, Z]),
    (ANYTHING, "BUIL", ANYTHING, [B, IH, L]),
    (ANYTHING, "B", ANYTHING, [B]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── C ──
C_RULES: RawBucket = [
    (NOTHING, "CH", "^", [K]),
    ("^E", "CH", ANYTHING, [K]),
    (ANYTHING, "CH", ANYTHING, [CH]),
    (" S", "CI", "#", [S, AY]),
    (ANYTHING, "CI", "A", [SH]),
    (ANYTHING, "CI", "O", [SH]),
    (ANYTHING, "CI", "EN", [SH]),
    (ANYTHING, "C", "+", [S]),
    (ANYTHING, "CK", ANYTHING, [K]),
    (ANYTHING, "COM", "%", [K, AH, M]),
    (ANYTHING, "C", ANYTHING, [K]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── D ──
D_RULES: RawBucket = [
    ("#:", "DED", NOTHING, [D, IH, D]),
    (".E", "D", NOTHING, [D]),
    ("#:^E", "D", NOTHING, [T]),
    (NOTHING, "DE", "^#", [D, IH]),
    (NOTHING, "DO", NOTHING, [D, UW]),
    (NOTHING, "DOES", ANYTHING, [D, AH, Z]),
    (NOTHING, "DOING", ANYTHING, [D, UW, IH, NG]),
    (NOTHING, "DOW", ANYTHING, [D, AW]),
    (ANYTHING, "DU", "A", [JH, UW]),
    (ANYTHING, "D", ANYTHING, [D]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── E ──
E_RULES: RawBucket = [
    ("#:", "E", NOTHING, [SILENT]),
    ("':^", "E", NOTHING, [SILENT]),
    (" :", "E", NOTHING, [IY]),
    ("#", "ED", NOTHING, [D]),
    ("#:", "E", "D ", [SILENT]),
    (ANYTHING, "EV", "ER", [EH, V]),
    (ANYTHING, "E", "^%", [IY]),
    (ANYTHING, "ERI", "#", [IY, R, IY]),
    (ANYTHING, "ERI", ANYTHING, [EH, R, IH]),
    ("#:", "ER", "#", [ER]),
    (ANYTHING, "ER", "#", [EH, R]),
    (ANYTHING, "ER", ANYTHING, [ER]),
    (NOTHING, "EVEN", ANYTHING, [IY, V, EH, N]),
    ("#:", "E", "W", [SILENT]),
    ("T", "EW", ANYTHING, [UW]),
    ("S", "EW", ANYTHING, [UW]),
    ("R", "EW", ANYTHING, [UW]),
    ("D", "EW", ANYTHING, [UW]),
    ("L", "EW", ANYTHING, [UW]),
    ("Z", "EW", ANYTHING, [UW]),
    ("N", "EW", ANYTHING, [UW]),
    ("J", "EW", ANYTHING, [UW]),
    ("TH", "EW", ANYTHING, [UW]),
    ("CH", "EW", ANYTHING, [UW]),
    ("SH", "EW", ANYTHING, [UW]),
    (ANYTHING, "EW", ANYTHING, [Y, UW]),
    (ANYTHING, "E", "O", [IY]),
    ("#:S", "ES", NOTHING, [IH, Z]),
    ("#:C", "ES", NOTHING, [IH, Z]),
    ("#:G", "ES", NOTHING, [IH, Z]),
    ("#:Z", "ES", NOTHING, [IH, Z]),
    ("#:X", "ES", NOTHING, [IH, Z]),
    ("#:J", "ES", NOTHING, [IH, Z]),
    ("#:CH", "ES", NOTHING, [IH, Z]),
    ("#:SH", "ES", NOTHING, [IH, Z]),
    ("#:", "E", "S ", [SILENT]),
    ("#:", "ELY", NOTHING, [L, IY]),
    ("#:", "EMENT", ANYTHING, [M, EH, N, T]),
    (ANYTHING, "EFUL", ANYTHING, [F, UH, L]),
    (ANYTHING, "EE", ANYTHING, [IY]),
    (ANYTHING, "EARN", ANYTHING, [ER, N]),
    (NOTHING, "EAR", "^", [ER]),
    (ANYTHING, "EAD", ANYTHING, [EH, D]),
    ("#:", "EA", NOTHING, [IY, AX]),
    (ANYTHING, "EA", "SU", [EH]),
    (ANYTHING, "EA", ANYTHING, [IY]),
    (ANYTHING, "EIGH", ANYTHING, [EY]),
    (ANYTHING, "EI", ANYTHING, [IY]),
    (NOTHING, "EYE", ANYTHING, [AY]),
    (ANYTHING, "EY", ANYTHING, [IY]),
    (ANYTHING, "EU", ANYTHING, [Y, UW]),
    (ANYTHING, "E", ANYTHING, [EH]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── F ──
F_RULES: RawBucket = [
    (ANYTHING, "FUL", ANYTHING, [F, UH, L]),
    (ANYTHING, "F", ANYTHING, [F]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── G ──
G_RULES: RawBucket = [
    (ANYTHING, "GIV", ANYTHING, [G, IH, V]),
    (NOTHING, "G", "I^", [G]),
    (ANYTHING, "GE", "T", [G, EH]),
    ("SU", "GGES", ANYTHING, [G, JH, EH, S]),
    (ANYTHING, "GG", ANYTHING, [G]),
    (" B#", "G", ANYTHING, [G]),
    (ANYTHING, "G", "+", [JH]),
    (ANYTHING, "GREAT", ANYTHING, [G, R, EY, T]),
    ("#", "GH", ANYTHING, [SILENT]),
    (ANYTHING, "G", ANYTHING, [G]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── H ──
H_RULES: RawBucket = [
    (NOTHING, "HAV", ANYTHING, [HH, AE, V]),
    (NOTHING, "HERE", ANYTHING, [HH, IY, R]),
    (NOTHING, "HOUR", ANYTHING, [AW, ER]),
    (ANYTHING, "HOW", ANYTHING, [HH, AW]),
    (ANYTHING, "H", "#", [HH]),
    (ANYTHING, "H", ANYTHING, [SILENT]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── I ──
I_RULES: RawBucket = [
    (NOTHING, "IN", ANYTHING, [IH, N]),
    (NOTHING, "I", NOTHING, [AY]),
    (ANYTHING, "IN", "D", [AY, N]),
    (ANYTHING, "IER", ANYTHING, [IY, ER]),
    ("#:R", "IED", ANYTHING, [IY, D]),
    (ANYTHING, "IED", NOTHING, [AY, D]),
    (ANYTHING, "IEN", ANYTHING, [IY, EH, N]),
    (ANYTHING, "IE", "T", [AY, EH]),
    (" :", "I", "%", [AY]),
    (ANYTHING, "I", "%", [IY]),
    (ANYTHING, "IE", ANYTHING, [IY]),
    (ANYTHING, "I", "^+:#", [IH]),
    (ANYTHING, "IR", "#", [AY, R]),
    (ANYTHING, "IZ", "%", [AY, Z]),
    (ANYTHING, "IS", "%", [AY, Z]),
    (ANYTHING, "I", "D%", [AY]),
    ("+^", "I", "^+", [IH]),
    (ANYTHING, "I", "T%", [AY]),
    ("#:^", "I", "^+", [IH]),
    (ANYTHING, "I", "^+", [AY]),
    (ANYTHING, "IR", ANYTHING, [ER]),
    (ANYTHING, "IGH", ANYTHING, [AY]),
    (ANYTHING, "ILD", ANYTHING, [AY, L, D]),
    (ANYTHING, "IGN", NOTHING, [AY, N]),
    (ANYTHING, "IGN", "^", [AY, N]),
    (ANYTHING, "IGN", "%", [AY, N]),
    (ANYTHING, "IQUE", ANYTHING, [IY, K]),
    (ANYTHING, "I", ANYTHING, [IH]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── J ──
J_RULES: RawBucket = [
    (ANYTHING, "J", ANYTHING, [JH]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── K ──
K_RULES: RawBucket = [
    (NOTHING, "K", "N", [SILENT]),
    (ANYTHING, "K", ANYTHING, [K]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── L ──
L_RULES: RawBucket = [
    (ANYTHING, "LO", "C#", [L, OW]),
    ("L", "L", ANYTHING, [SILENT]),
    ("#:^", "L", "%", [AX, L]),
    (ANYTHING, "LEAD", ANYTHING, [L, IY, D]),
    (ANYTHING, "L", ANYTHING, [L]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── M ──
M_RULES: RawBucket = [
    (ANYTHING, "MOV", ANYTHING, [M, UW, V]),
    (ANYTHING, "M", ANYTHING, [M]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── N ──
N_RULES: RawBucket = [
    ("E", "NG", "+", [N, JH]),
    (ANYTHING, "NG", "R", [NG, G]),
    (ANYTHING, "NG", "#", [NG, G]),
    (ANYTHING, "NGL", "%", [NG, G, AX, L]),
    (ANYTHING, "NG", ANYTHING, [NG]),
    (ANYTHING, "NK", ANYTHING, [NG, K]),
    (NOTHING, "NOW", NOTHING, [N, AW]),
    (ANYTHING, "N", ANYTHING, [N]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── O ──
O_RULES: RawBucket = [
    (ANYTHING, "OF", NOTHING, [AX, V]),
    (ANYTHING, "OROUGH", ANYTHING, [ER, OW]),
    ("#:", "OR", NOTHING, [ER]),
    ("#:", "ORS", NOTHING, [ER, Z]),
    (ANYTHING, "OR", ANYTHING, [AO, R]),
    (NOTHING, "ONE", ANYTHING, [W, AH, N]),
    (ANYTHING, "OW", ANYTHING, [OW]),
    (NOTHING, "OVER", ANYTHING, [OW, V, ER]),
    (ANYTHING, "OV", ANYTHING, [AH, V]),
    (ANYTHING, "O", "^%", [OW]),
    (ANYTHING, "O", "^EN", [OW]),
    (ANYTHING, "O", "^I#", [OW]),
    (ANYTHING, "OL", "D", [OW, L]),
    (ANYTHING, "OUGHT", ANYTHING, [AO, T]),
    (ANYTHING, "OUGH", ANYTHING, [AH, F]),
    (NOTHING, "OU", ANYTHING, [AW]),
    ("H", "OU", "S#", [AW]),
    (ANYTHING, "OUS", ANYTHING, [AX, S]),
    (ANYTHING, "OUR", ANYTHING, [AO, R]),
    (ANYTHING, "OULD", ANYTHING, [UH, D]),
    ("^", "OU", "^L", [AH]),
    (ANYTHING, "OUP", ANYTHING, [UW, P]),
    (ANYTHING, "OU", ANYTHING, [AW]),
    (ANYTHING, "OY", ANYTHING, [OY]),
    (ANYTHING, "OING", ANYTHING, [OW, IH, NG]),
    (ANYTHING, "OI", ANYTHING, [OY]),
    (ANYTHING, "OOR", ANYTHING, [AO, R]),
    (ANYTHING, "OOK", ANYTHING, [UH, K]),
    (ANYTHING, "OOD", ANYTHING, [UH, D]),
    (ANYTHING, "OO", ANYTHING, [UW]),
    (ANYTHING, "O", "E", [OW]),
    (ANYTHING, "O", NOTHING, [OW]),
    (ANYTHING, "OA", ANYTHING, [OW]),
    (NOTHING, "ONLY", ANYTHING, [OW, N, L, IY]),
    (NOTHING, "ONCE", ANYTHING, [W, AH, N, S]),
    (ANYTHING, "ON'T", ANYTHING, [OW, N, T]),
    ("C", "O", "N", [AA]),
    (ANYTHING, "O", "NG", [AO]),
    (" :^", "O", "N", [AH]),
    ("I", "ON", ANYTHING, [AX, N]),
    ("#:", "ON", NOTHING, [AX, N]),
    ("#^", "ON", ANYTHING, [AX, N]),
    (ANYTHING, "O", "ST ", [OW]),
    (ANYTHING, "OF", "^", [AO, F]),
    (ANYTHING, "OTHER", ANYTHING, [AH, DH, ER]),
    (ANYTHING, "OSS", NOTHING, [AO, S]),
    ("#:^", "OM", ANYTHING, [AH, M]),
    (ANYTHING, "O", ANYTHING, [AA]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── P ──
P_RULES: RawBucket = [
    (ANYTHING, "PH", ANYTHING, [F]),
    (ANYTHING, "PEOP", ANYTHING, [P, IY, P]),
    (ANYTHING, "POW", ANYTHING, [P, AW]),
    (ANYTHING, "PUT", NOTHING, [P, UH, T]),
    (ANYTHING, "P", ANYTHING, [P]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── Q ──
Q_RULES: RawBucket = [
    (ANYTHING, "QUAR", ANYTHING, [K, W, AO, R]),
    (ANYTHING, "QU", ANYTHING, [K, W]),
    (ANYTHING, "Q", ANYTHING, [K]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── R ──
R_RULES: RawBucket = [
    (NOTHING, "RE", "^#", [R, IY]),
    (ANYTHING, "R", ANYTHING, [R]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── S ──
S_RULES: RawBucket = [
    (ANYTHING, "SH", ANYTHING, [SH]),
    ("#", "SION", ANYTHING, [ZH, AX, N]),
    (ANYTHING, "SOME", ANYTHING, [S, AH, M]),
    ("#", "SUR", "#", [ZH, ER]),
    (ANYTHING, "SUR", "#", [SH, ER]),
    ("#", "SU", "#", [ZH, UW]),
    ("#", "SSU", "#", [SH, UW]),
    ("#", "SED", NOTHING, [Z, D]),
    ("#", "S", "#", [Z]),
    (ANYTHING, "SAID", ANYTHING, [S, EH, D]),
    ("^", "SION", ANYTHING, [SH, AX, N]),
    (ANYTHING, "S", "S", [SILENT]),
    (".", "S", NOTHING, [Z]),
    ("#:.E", "S", NOTHING, [Z]),
    ("#:^##", "S", NOTHING, [Z]),
    ("#:^#", "S", NOTHING, [S]),
    ("U", "S", NOTHING, [S]),
    (" :#", "S", NOTHING, [Z]),
    (NOTHING, "SCH", "#", [S, K]),
    (NOTHING, "SCH", ANYTHING, [SH]),
    (ANYTHING, "S", "C+", [SILENT]),
    ("#", "SM", ANYTHING, [Z, M]),
    ("#", "SN", "'", [Z, AX, N]),
    (ANYTHING, "S", ANYTHING, [S]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── T ──
T_RULES: RawBucket = [
    (NOTHING, "THE", NOTHING, [DH, AX]),
    (ANYTHING, "TO", NOTHING, [T, UW]),
    (ANYTHING, "THAT", NOTHING, [DH, AE, T]),
    (NOTHING, "THIS", NOTHING, [DH, IH, S]),
    (NOTHING, "THEY", ANYTHING, [DH, EY]),
    (NOTHING, "THERE", ANYTHING, [DH, EH, R]),
    (ANYTHING, "THER", ANYTHING, [DH, ER]),
    (ANYTHING, "THEIR", ANYTHING, [DH, EH, R]),
    (NOTHING, "THAN", NOTHING, [DH, AE, N]),
    (NOTHING, "THEM", NOTHING, [DH, EH, M]),
    (ANYTHING, "THESE", NOTHING, [DH, IY, Z]),
    (NOTHING, "THEN", ANYTHING, [DH, EH, N]),
    (ANYTHING, "THROUGH", ANYTHING, [TH, R, UW]),
    (ANYTHING, "THOSE", ANYTHING, [DH, OW, Z]),
    (ANYTHING, "THOUGH", NOTHING, [DH, OW]),
    (NOTHING, "THUS", ANYTHING, [DH, AH, S]),
    (ANYTHING, "TH", ANYTHING, [TH]),
    ("#:", "TED", NOTHING, [T, IH, D]),
    ("S", "TI", "#N", [CH]),
    (ANYTHING, "TI", "O", [SH]),
    (ANYTHING, "TI", "A", [SH]),
    (ANYTHING, "TIEN", ANYTHING, [SH, AX, N]),
    (ANYTHING, "TUR", "#", [CH, ER]),
    (ANYTHING, "TU", "A", [CH, UW]),
    (NOTHING, "TWO", ANYTHING, [T, UW]),
    (ANYTHING, "T", ANYTHING, [T]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── U ──
U_RULES: RawBucket = [
    (NOTHING, "UN", "I", [Y, UW, N]),
    (NOTHING, "UN", ANYTHING, [AH, N]),
    (NOTHING, "UPON", ANYTHING, [AX, P, AO, N]),
    ("T", "UR", "#", [UH, R]),
    ("S", "UR", "#", [UH, R]),
    ("R", "UR", "#", [UH, R]),
    ("D", "UR", "#", [UH, R]),
    ("L", "UR", "#", [UH, R]),
    ("Z", "UR", "#", [UH, R]),
    ("N", "UR", "#", [UH, R]),
    ("J", "UR", "#", [UH, R]),
    ("TH", "UR", "#", [UH, R]),
    ("CH", "UR", "#", [UH, R]),
    ("SH", "UR", "#", [UH, R]),
    (ANYTHING, "UR", "#", [Y, UH, R]),
    (ANYTHING, "UR", ANYTHING, [ER]),
    (ANYTHING, "U", "^ ", [AH]),
    (ANYTHING, "U", "^^", [AH]),
    (ANYTHING, "UY", ANYTHING, [AY]),
    (" G", "U", "#", [SILENT]),
    ("G", "U", "%", [SILENT]),
    ("G", "U", "#", [W]),
    ("#N", "U", ANYTHING, [Y, UW]),
    ("T", "U", ANYTHING, [UW]),
    ("S", "U", ANYTHING, [UW]),
    ("R", "U", ANYTHING, [UW]),
    ("D", "U", ANYTHING, [UW]),
    ("L", "U", ANYTHING, [UW]),
    ("Z", "U", ANYTHING, [UW]),
    ("N", "U", ANYTHING, [UW]),
    ("J", "U", ANYTHING, [UW]),
    ("TH", "U", ANYTHING, [UW]),
    ("CH", "U", ANYTHING, [UW]),
    ("SH", "U", ANYTHING, [UW]),
    (ANYTHING, "U", ANYTHING, [Y, UW]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── V ──
V_RULES: RawBucket = [
    (ANYTHING, "VIEW", ANYTHING, [V, Y, UW]),
    (ANYTHING, "V", ANYTHING, [V]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── W ──
W_RULES: RawBucket = [
    (NOTHING, "WERE", ANYTHING, [W, ER]),
    (ANYTHING, "WA", "S", [W, AA]),
    (ANYTHING, "WA", "T", [W, AA]),
    (ANYTHING, "WHERE", ANYTHING, [WH, EH, R]),
    (ANYTHING, "WHAT", ANYTHING, [WH, AA, T]),
    (ANYTHING, "WHOL", ANYTHING, [HH, OW, L]),
    (ANYTHING, "WHO", ANYTHING, [HH, UW]),
    (ANYTHING, "WH", ANYTHING, [WH]),
    (ANYTHING, "WAR", ANYTHING, [W, AO, R]),
    (ANYTHING, "WOR", "^", [W, ER]),
    (ANYTHING, "WR", ANYTHING, [R]),
    (ANYTHING, "W", ANYTHING, [W]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── X ──
X_RULES: RawBucket = [
    (ANYTHING, "X", ANYTHING, [K, S]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── Y ──
Y_RULES: RawBucket = [
    (ANYTHING, "YOUNG", ANYTHING, [Y, AH, NG]),
    (NOTHING, "YOU", ANYTHING, [Y, UW]),
    (NOTHING, "YES", ANYTHING, [Y, EH, S]),
    (NOTHING, "Y", ANYTHING, [Y]),
    ("#:^", "Y", NOTHING, [IY]),
    ("#:^", "Y", "I", [IY]),
    (" :", "Y", NOTHING, [AY]),
    (" :", "Y", "#", [AY]),
    (" :", "Y", "^+:#", [IH]),
    (" :", "Y", "^#", [AY]),
    (ANYTHING, "Y", ANYTHING, [IH]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# ── Z ──
Z_RULES: RawBucket = [
    (ANYTHING, "Z", ANYTHING, [Z]),
    (ANYTHING, UNKNOWN, ANYTHING, [SILENT]),
]

# Bucket 0 is punctuation, buckets 1-26 are A-Z.
ENGLISH_RULES: List[RawBucket] = [
    PUNCT_RULES,
    A_RULES, B_RULES, C_RULES, D_RULES, E_RULES, F_RULES, G_RULES,
    H_RULES, I_RULES, J_RULES, K_RULES, L_RULES, M_RULES, N_RULES,
    O_RULES, P_RULES, Q_RULES, R_RULES, S_RULES, T_RULES, U_RULES,
    V_RULES, W_RULES, X_RULES, Y_RULES, Z_RULES,
]
