"""マニフェスト駆動のエンティティアセットツリー検証ツール。"""
