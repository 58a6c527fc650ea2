"""Solutions to classic algorithmic problems on strings, numbers, arrays, schedules, trees and linked lists."""

__version__ = "0.1.0"