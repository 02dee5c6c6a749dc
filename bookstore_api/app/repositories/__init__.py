"""
Data access layer.

Repositories translate logical data operations into parameterized SQL
and map rows back into plain records.  They contain no business
rules; deciding whether a missing row is an error is left to the
services.
"""
