"""
どこで: `engine.ui` サブパッケージ。
何を: 計算コアへ入力（オクターブ数・波形名）を供給する操作状態と HUD ラベル。
"""
