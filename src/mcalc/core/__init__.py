"""
Core numeric layer: errors, logging, math context and the decimal/hypercomplex
number types.

Independent of any symbolic or presentation layer.
"""
