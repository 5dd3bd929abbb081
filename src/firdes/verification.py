#!/usr/bin/env python3
"""
Frequency-response checks for designed coefficients.
"""

from __future__ import annotations
from typing import Dict, Any, Optional, Sequence

import numpy as np
from scipy import signal
import matplotlib.pyplot as plt


def filter_response(
    coefficients: Sequence[float],
    n_freqs: int = 8192,
    plot: bool = False,
    title: Optional[str] = None
) -> Dict[str, Any]:
    """
    Summarize the magnitude response of a filter.

    Parameters
    ----------
    coefficients : sequence of float
        Filter coefficients
    n_freqs : int
        Number of frequency points on [0, 0.5) cycles/sample
    plot : bool
        Whether to plot the magnitude response
    title : str, optional
        Plot title

    Returns
    -------
    dict
        freqs, mag_db, dc_gain, dc_gain_db, f_3db, peak_sidelobe_db,
        symmetry_error. f_3db and peak_sidelobe_db are None when the
        response never falls 3 dB below DC.
    """
    h = np.asarray(coefficients, dtype=np.float64)
    w, H = signal.freqz(h, worN=n_freqs)
    freqs = w / (2 * np.pi)
    mag_db = 20 * np.log10(np.abs(H) + 1e-300)

    dc_gain = float(np.sum(h))
    dc_gain_db = float(mag_db[0])

    # First point 3 dB below DC
    below = np.nonzero(mag_db < dc_gain_db - 3)[0]
    f_3db = None
    peak_sidelobe_db = None
    if below.size:
        idx_3db = below[0]
        f_3db = float(freqs[idx_3db])

        # Sidelobes start after the first null following the -3 dB point
        tail = mag_db[idx_3db:]
        rising = np.nonzero(np.diff(tail) > 0)[0]
        if rising.size:
            sidelobes = tail[rising[0]:]
            peak_sidelobe_db = float(sidelobes.max() - dc_gain_db)

    results = {
        'freqs': freqs,
        'mag_db': mag_db,
        'dc_gain': dc_gain,
        'dc_gain_db': dc_gain_db,
        'f_3db': f_3db,
        'peak_sidelobe_db': peak_sidelobe_db,
        'symmetry_error': float(np.max(np.abs(h - h[::-1]))) if h.size else 0.0,
    }

    if plot:
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(freqs, mag_db - dc_gain_db)
        if f_3db is not None:
            ax.axvline(f_3db, color='g', linestyle='--', label=f'-3dB: {f_3db:.4f}')
        if peak_sidelobe_db is not None:
            ax.axhline(peak_sidelobe_db, color='r', linestyle='--',
                       label=f'Peak sidelobe: {peak_sidelobe_db:.1f} dB')
        ax.set_xlabel('Normalized frequency (cycles/sample)')
        ax.set_ylabel('Magnitude relative to DC (dB)')
        ax.set_title(title or f'FIR magnitude response ({h.size} taps)')
        ax.grid(True, alpha=0.3)
        ax.legend()
        ax.set_ylim(-200, 5)
        plt.show()

    return results
