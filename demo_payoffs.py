"""
Demo: Product Payoffs on Hand-Built Paths

Shows what each product asks the simulator for (timeline and dataline),
then evaluates payoffs on a fixed spot path:
1. European call
2. Up-and-out call with fuzzy barrier (barrier and vanilla payoffs)
3. Europeans book (maturity major)
4. Contingent bond
"""

import sys
sys.path.insert(0, 'src')

from products import (
    ContingentBond,
    European,
    Europeans,
    Snapshot,
    UpAndOutCall,
)


def flat_path(product, spots, discount=0.99, libor=0.03, numeraire=1.0):
    """Snapshots carrying exactly what the product declared"""
    return [
        Snapshot(
            forwards=[spot] * len(req.forward_maturities),
            discounts=[discount] * len(req.discount_maturities),
            libors=[libor] * len(req.rate_definitions),
            numeraire=numeraire if req.numeraire else None,
        )
        for spot, req in zip(spots, product.dataline)
    ]


products = [
    European(100.0, 1.0, 1.25),
    UpAndOutCall(100.0, 120.0, 1.0, 0.25, 0.01),
    Europeans({1.0: [90.0, 100.0, 110.0], 2.0: [100.0]}),
    ContingentBond(1.0, 0.02, 0.25, 0.01),
]

print("=" * 80)
print("PRODUCT PAYOFFS")
print("=" * 80)

for product in products:
    n = len(product.timeline)
    spots = [100.0 + 5.0 * i for i in range(n)]

    # Each worker would hold its own clone
    worker_copy = product.clone()
    payoffs = worker_copy.evaluate(flat_path(worker_copy, spots))

    print(f"\n{product!r}")
    print(f"  timeline: {', '.join(f'{t:.4f}' for t in product.timeline)}")
    for i, req in enumerate(product.dataline):
        print(f"  date {i}: numeraire={req.numeraire} forwards={req.forward_maturities} "
              f"discounts={req.discount_maturities} libors={len(req.rate_definitions)}")
    for label, value in zip(product.payoff_labels, payoffs):
        print(f"  {label:<70s} {value:10.6f}")
