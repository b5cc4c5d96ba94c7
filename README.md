# rsfec

rsfec provides Reed-Solomon error correction over GF(2^8). Every code uses 255-byte blocks.
You choose four settings for each code:

- the primitive polynomial
- the first consecutive root
- the gap between generator roots
- the number of parity bytes (`num_roots`)

The decoder corrects errors. It also corrects erasures, which are byte positions you already
know to be bad. With `num_roots` parity bytes it repairs any mix where
`2 * errors + erasures <= num_roots`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Encoding and decoding

```python
from rsfec.reed_solomon import ReedSolomon
from rsfec.decode import DecodeError

# CCSDS primitive polynomial x^8 + x^7 + x^2 + x + 1, 32 parity bytes
rs = ReedSolomon(0x187, 1, 1, 32)

message = b"hello, reed-solomon"
block = rs.encode(message)          # the message followed by 32 parity bytes

corrupted = bytearray(block)
corrupted[0] ^= 0xFF
corrupted[5] ^= 0x12
assert rs.decode(bytes(corrupted)) == message

# erasures: positions within the received block that are known to be bad
corrupted[10] ^= 0x55
assert rs.decode(bytes(corrupted), [0, 5, 10]) == message
```

A message may be shorter than `rs.message_length` (`255 - num_roots`). The code then treats it
as a shortened block. The arithmetic pads it with zeros, but the padding is never sent.

`decode` raises `DecodeError`, a subclass of `ValueError`, in these cases:

- the block has more damage than the code can repair
- the block is longer than 255 bytes
- the block is shorter than its parity bytes
- there are more erasures than parity bytes
- an erasure position falls outside the block

`encode` raises `ValueError` when the message is longer than `message_length`.

`ReedSolomon.describe()` returns a readable dump of the code. It contains:

- the field's exp and log tables
- the generator roots
- the generator polynomial, as plain coefficients and in alpha (log) form
- the parity remainder from the most recent `encode`, once `encode` has been called

## Lower-level pieces

- `rsfec.polynomial`
  - `Field` does GF(2^8) arithmetic built from a primitive polynomial. Its methods are `add`,
    `sub`, `mul`, `div`, `pow` and `sum`, plus log-domain helpers. The `exp` and `log` tables
    are attributes.
  - Helpers for polynomials stored as coefficient lists, lowest order first: `poly_mul`,
    `poly_mod`, `formal_derivative`, `poly_eval`, `poly_eval_lut`, `poly_eval_log_lut`,
    `build_exp_lut` and `poly_from_roots`.
- `rsfec.locator` holds the decoding steps:
  - `find_syndromes`
  - `find_error_locator`, which uses Berlekamp-Massey
  - `factorize_error_locator`, which uses Chien search
  - `find_error_evaluator`
  - `find_error_values`, which uses Forney's algorithm
  - `find_error_locations` and `find_error_roots_from_locations`
- `rsfec.decode` holds `Decoder`, which combines these steps. It builds its lookup tables
  once, when you create it. `ReedSolomon.decoder` creates one the first time it is used.
- `rsfec.noise` holds helpers for simulating a BPSK channel with additive white Gaussian noise:
  - `encode_bpsk`
  - `decode_bpsk`, which makes hard decisions
  - `decode_bpsk_soft`, which makes soft decisions
  - `byte_to_bits`
  - `gaussian` and `white_noise`, where `white_noise` targets a given Eb/N0 in dB
  - `sigma_for_eb_n0`, `db_to_amplitude` and `amplitude_to_db`
  - `add_white_noise`
  - `bit_distance`
  - `test_conv_noise`, which counts bit errors after a round trip through the channel

`test_conv_noise` takes any `encode` and `decode` callables. It sends a message through
`encode`, BPSK modulation, the noise you give it, soft demodulation and `decode`, then returns
the number of bit errors. It raises `ValueError` when the decoded length differs from the
message length.

## Finding primitive polynomials

```
rsfec-primitive-polys
```

This command lists every degree-8 polynomial under which repeated doubling reaches all 255
non-zero elements of GF(2^8). Each one is shown in hex and in algebraic form, for example:

```
0x187 valid: x^8 + x^7 + x^2 + x + 1
```

The same search is available as `rsfec.primitive.find_primitive_polynomials()`. To check a
single candidate, use `is_primitive`. To render one in algebraic form, use `format_polynomial`.

## What this package does not do

- It has no convolutional encoder or Viterbi decoder. The channel helpers in `rsfec.noise`
  work with whatever encode and decode functions you pass them.
- It works only over GF(2^8) with 255-byte blocks. It has no other symbol sizes.
- It has no command for encoding or decoding files or streams. You use those features as a
  library.