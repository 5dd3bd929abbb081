#!/usr/bin/env python3
"""
Example: size a Kaiser lowpass, then check its symbol-spaced ISI.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import logging

import numpy as np

from firdes import (
    estimate_req_filter_len,
    fir_kaiser_window,
    filter_isi,
    filter_response,
)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    k = 4           # samples/symbol
    slsl = 60.0     # sidelobe suppression [dB]
    bandwidth = 0.05

    n_est = estimate_req_filter_len(bandwidth, slsl)
    # Smallest symbol delay whose 2*k*m+1 length covers the estimate
    m = max(1, int(np.ceil((n_est - 1) / (2 * k))))
    n = 2 * k * m + 1
    print(f"Estimated {n_est} taps -> using {n} taps (k={k}, m={m})")

    h = np.empty(n)
    fir_kaiser_window(n, 1.0 / k, slsl, 0.0, out=h)

    stats = filter_response(h)
    print(f"DC gain: {stats['dc_gain']:.6f} ({stats['dc_gain_db']:.3f} dB)")
    if stats['f_3db'] is not None:
        print(f"-3 dB point: {stats['f_3db']:.4f} cycles/sample")
    if stats['peak_sidelobe_db'] is not None:
        print(f"Peak sidelobe: {stats['peak_sidelobe_db']:.1f} dB")

    mse, peak = filter_isi(h, k, m)
    print(f"ISI: mse {mse:.3e}, max {peak:.3e}")


if __name__ == "__main__":
    main()
