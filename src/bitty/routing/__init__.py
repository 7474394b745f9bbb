"""Routing — ordered route collection with first-match-wins resolution.

Routes are registered in precedence order and matched by compiling each
path template and its constraints into an anchored regular expression.
"""
