"""
どこで: `util.constants`。
何を: 描画系で共有する定数。
"""

# LINE_STRIP の区切りに使うインデックス（uint32 最大値）
PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF

# 波形プロットを描き始める x 座標（原点基準, px）
WF_TRANSLATE = 250.0

# 円をポリラインで近似する際の分割数
CIRCLE_SEGMENTS = 64

DEFAULT_WINDOW_SIZE = (800, 600)
