# usage_example.py
# Minimal usage example for jsonrift.
# This file is not part of the jsonrift package. For reference only.

from jsonrift import compare_bytes, compare_native, format_diff, format_error

# Inputs
expected: bytes = b"""
{
    "name":  "order-42",
    "lines": [{"sku": "A1", "qty": 2}, {"sku": "B7", "qty": 1}],
    "paid":  false
}
"""
actual: bytes = b"""
{
    "name":  "order-42",
    "lines": [{"sku": "A1", "qty": 3}, {"sku": "B7", "qty": 1}, {"sku": "C0", "qty": 5}],
    "paid":  true,
    "note":  null
}
"""

# Compute
result = compare_bytes(expected, actual, source_a="expected", source_b="actual")

# Inspect
print(f"status: {result.status.value}")
print(format_diff(result, color=True).decode("utf-8"))

# Expected output (colour bands omitted):
# status: DIFFERENT
# {
#     "lines": [
#         {
#             <> "qty": 2,
#             ** "qty": 3,
#             "sku": "A1"
#         },
#         {"qty":1,"sku":"B7"},
#         << {"qty":5,"sku":"C0"}
#     ],
#     "name": "order-42",
#     << "note": null,
#     <> "paid": false
#     ** "paid": true
# }

# Native structures are marshaled first; a scalar top level cannot be compared:
failed = compare_native(1, 1)
print(f"status: {failed.status.value} ({format_error(failed)})")
# status: ERROR (DecodeError: <memory> a is neither a JSON object nor a JSON array (top level is int))
