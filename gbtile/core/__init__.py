"""gbtile.core: Foundation layer.

Contains the types, errors, decoder, normalizer, packer and emitters.
This module has NO dependencies on gbtile.quantizers or gbtile.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
