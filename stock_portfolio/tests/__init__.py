"""
Stock Portfolio Test Suite

Unit tests for transactions, stock holdings, the portfolio, configuration
loading and the demo driver.
"""
