"""Decoder for the narrow floating point numbers packed into Linking beacon data.

Linking sensors squeeze their readings into 12 bits using an IEEE-754 style
layout with a non-standard split between sign, exponent and mantissa, for
example 1 sign bit, 4 exponent bits and 7 mantissa bits for temperatures.
The usual IEEE rules apply:

 - the exponent is biased by ``2 ** (exponent_bits - 1) - 1``
 - an all-zero exponent encodes zero and subnormal numbers
 - an all-ones exponent encodes infinity (zero mantissa) or NaN
"""

import math
from typedargs.exceptions import ArgumentError


def decode_float(raw: int, sign_bits: int, exponent_bits: int, mantissa_bits: int) -> float:
    """Decode a bit packed floating point number.

    Args:
        raw: The packed unsigned value, laid out as sign | exponent | mantissa
            with the mantissa in the least significant bits.
        sign_bits: 1 if the value has a sign bit, 0 if it is unsigned.
        exponent_bits: The width of the exponent field.
        mantissa_bits: The width of the mantissa (fraction) field.

    Returns:
        The decoded value.  This is total over every ``raw`` that fits in the
        declared width, so infinities and NaN can be returned.
    """

    if sign_bits not in (0, 1):
        raise ArgumentError("Sign must be 0 or 1 bits wide", sign_bits=sign_bits)

    if exponent_bits < 1 or mantissa_bits < 0:
        raise ArgumentError("Invalid exponent or mantissa width", exponent_bits=exponent_bits,
                            mantissa_bits=mantissa_bits)

    width = sign_bits + exponent_bits + mantissa_bits
    if raw < 0 or raw >= (1 << width):
        raise ArgumentError("Raw value does not fit in the declared width", raw=raw, width=width)

    mantissa = raw & ((1 << mantissa_bits) - 1)
    exponent = (raw >> mantissa_bits) & ((1 << exponent_bits) - 1)
    negative = sign_bits == 1 and bool(raw >> (exponent_bits + mantissa_bits))

    max_exponent = (1 << exponent_bits) - 1
    bias = (1 << (exponent_bits - 1)) - 1
    fraction = mantissa / (1 << mantissa_bits)

    if exponent == max_exponent:
        if mantissa != 0:
            return math.nan

        value = math.inf
    elif exponent == 0:
        value = math.ldexp(fraction, 1 - bias)
    else:
        value = math.ldexp(1.0 + fraction, exponent - bias)

    if negative:
        return -value

    return value
