"""
どこで: `engine.core` サブパッケージ。
何を: エピサイクル連鎖・半径線・軌跡バッファ・位相ステップ・セッション・Geometry・フレーム駆動。
なぜ: 純粋な計算部分を描画（engine.render）や UI（engine.ui）から切り離して再利用・テスト可能にするため。
"""
