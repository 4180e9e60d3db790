"""Validation layer: decoders for every argument envelope at the API boundary.

All decoding is pure and synchronous. The only public entry point that
callers outside this package need is :func:`livingthings.validation.args.decode_args`.
"""
