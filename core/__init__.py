"""
Reading comparison core: normalization, tokenization, word similarity, feedback bands
and the comparison engine.
"""
