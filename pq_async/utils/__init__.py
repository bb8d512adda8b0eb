"""
Generic, stateless utility primitives shared across modules.

Includes byte-order conversion and hex rendering for wire-format data,
locale-aware number formatting and parsing, byte-wise text helpers, a
variadic last-argument selector, clock/stopwatch abstractions, and logging
setup.
"""
