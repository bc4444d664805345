"""ショッピングカート明細"""
