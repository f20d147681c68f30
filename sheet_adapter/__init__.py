"""
openpyxlワークシート向けの列名解決・セル値変換ヘルパー
"""
