"""
Well-known requirement ids read outside the generic group walk.
"""

# "Your answer" of the selection criteria
SELECTION_YOUR_ANSWER = "a68a18dc-b4d7-48a9-8cd8-7b9da0b323ed"

# Technical ability: "Do you allow checks?" shares the answer field
ALLOW_CHECKS = "2aa1959f-97f8-4263-9a3b-fc8425b4c084"

# Pre-2016.12 sequential requirements, one per sibling group, read in order
# onto amount1..5/currency1..5 and description1..5
AMOUNT_SEQUENCE = (
    "7aa6ed12-454f-483d-9f29-bcb9bf1f7550",
    "f3ea9cdd-1b6c-4849-8fa5-da7d91e8519f",
    "53a20eef-85b2-4695-b280-a9cc93043b26",
    "6d2f8a31-94c7-4e05-b8a2-1f7c3e9d0b54",
    "a9c05e72-3b1d-4f86-9e4a-c28d7f615e30",
)
DESCRIPTION_SEQUENCE = (
    "c0445ef2-9620-4802-9db4-a190ceab65e9",
    "5165e0d1-d359-41e0-8a66-1a97da7dab8e",
    "8a4c3f27-1d59-4b0e-9c6a-72e5b1d84f03",
    "d7e1a905-6b2c-4f38-a1d4-3c9f0e85b627",
    "2f6b9d14-c3a8-47e5-8b01-e4d2a7c6f593",
)
