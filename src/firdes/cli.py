#!/usr/bin/env python3
"""
Command line front end for the closed-form FIR designers.

CLI examples
------------
# Tap count for a 0.1 transition band and 60 dB sidelobes:
python3 -m firdes.cli estimate --bandwidth 0.1 --slsl 60

# Kaiser lowpass, length estimated from the transition band:
python3 -m firdes.cli kaiser --bandwidth 0.1 --cutoff 0.25 --slsl 60

# 25-tap Kaiser lowpass with a quarter-sample delay and an ISI report
# (k=4 samples/symbol, m=3 symbols → 2*4*3+1 = 25 taps):
python3 -m firdes.cli kaiser --taps 25 --cutoff 0.25 --slsl 60 --mu 0.25 --isi 4 3

# Doppler fading filter with a line-of-sight component:
python3 -m firdes.cli doppler --taps 51 --fd 0.05 --rice-k 2 --theta 0.3
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from .analysis import filter_isi
from .config import DOPPLER_WINDOW_BETA, KaiserFilterSpec, DopplerFilterSpec
from .design import design_from_spec, estimate_req_filter_len, kaiser_beta_slsl
from .errors import FilterDesignError
from .verification import filter_response


def report(taps: np.ndarray, isi: Optional[Sequence[int]], plot: bool, log: logging.Logger) -> None:
    """Print coefficients and the requested diagnostics."""
    np.savetxt(sys.stdout, taps, fmt="%.18e")

    stats = filter_response(taps, plot=plot)
    log.info("Taps: %d, DC gain %.12f (%.6f dB), symmetry error %.2e",
             len(taps), stats['dc_gain'], stats['dc_gain_db'], stats['symmetry_error'])
    if stats['f_3db'] is not None:
        log.info("-3 dB point: %.6f cycles/sample", stats['f_3db'])
    if stats['peak_sidelobe_db'] is not None:
        log.info("Peak sidelobe: %.2f dB", stats['peak_sidelobe_db'])

    if isi is not None:
        k, m = isi
        mse, peak = filter_isi(taps, k, m)
        log.info("ISI (k=%d, m=%d): mse %.6e, max %.6e", k, m, mse, peak)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="firdes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Closed-form FIR coefficient designer and ISI analyzer.",
    )

    # ─── Misc ───
    p.add_argument("--debug", action="store_true",
                   help="Enable DEBUG-level logging for extra detail.")
    p.add_argument("--log-file", type=str,
                   help="Write all log output to this file in addition to the console.")

    sub = p.add_subparsers(dest="command", required=True)

    # ─── Estimators ───
    e = sub.add_parser("estimate", help="Estimate the required filter length.",
                       formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    e.add_argument("--bandwidth", "-b", type=float, required=True,
                   help="Transition bandwidth, 0 < b <= 0.5.")
    e.add_argument("--slsl", type=float, required=True,
                   help="Sidelobe suppression level (dB).")

    b = sub.add_parser("beta", help="Kaiser window beta for a sidelobe level.",
                       formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    b.add_argument("--slsl", type=float, required=True,
                   help="Sidelobe suppression level (dB).")

    # ─── Kaiser designer ───
    k = sub.add_parser("kaiser", help="Design a Kaiser-windowed sinc lowpass.",
                       formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    length = k.add_mutually_exclusive_group(required=True)
    length.add_argument("--taps", "-n", type=int,
                        help="Filter length.")
    length.add_argument("--bandwidth", "-b", type=float,
                        help="Transition bandwidth; the length is estimated from it.")
    k.add_argument("--cutoff", type=float, required=True,
                   help="Cutoff frequency in [0, 1].")
    k.add_argument("--slsl", type=float, default=60.0,
                   help="Sidelobe suppression level (dB).")
    k.add_argument("--mu", type=float, default=0.0,
                   help="Fractional sample offset in [-0.5, 0.5].")

    # ─── Doppler designer ───
    d = sub.add_parser("doppler", help="Design a Doppler/Rice fading filter.",
                       formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    d.add_argument("--taps", "-n", type=int, required=True,
                   help="Filter length.")
    d.add_argument("--fd", type=float, required=True,
                   help="Normalized Doppler frequency, 0 < fd < 0.5.")
    d.add_argument("--rice-k", type=float, default=0.0,
                   help="Rice fading factor K >= 0.")
    d.add_argument("--theta", type=float, default=0.0,
                   help="Line-of-sight angle of arrival (rad).")
    d.add_argument("--beta", type=float, default=DOPPLER_WINDOW_BETA,
                   help="Kaiser window shape parameter.")

    for g in (k, d):
        g.add_argument("--isi", type=int, nargs=2, metavar=("K", "M"),
                       help="Report ISI for K samples/symbol and M symbols delay "
                            "(needs 2*K*M+1 taps).")
        g.add_argument("--plot", action="store_true",
                       help="Show magnitude response plot.")

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    a = p.parse_args(argv)

    log_handlers = [logging.StreamHandler(sys.stderr)]
    if a.log_file:
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
        log_handlers.append(logging.FileHandler(a.log_file, mode='w'))
    else:
        log_format = "%(levelname)s %(message)s"

    logging.basicConfig(
        handlers=log_handlers,
        level=logging.DEBUG if a.debug else logging.INFO,
        format=log_format
    )
    log = logging.getLogger("firdes")

    try:
        if a.command == "estimate":
            print(estimate_req_filter_len(a.bandwidth, a.slsl))
        elif a.command == "beta":
            print(f"{kaiser_beta_slsl(a.slsl):.6f}")
        else:
            if a.command == "kaiser":
                spec = KaiserFilterSpec(fc=a.cutoff, slsl=a.slsl, mu=a.mu,
                                        n=a.taps, bandwidth=a.bandwidth)
            else:
                spec = DopplerFilterSpec(n=a.taps, fd=a.fd, K=a.rice_k,
                                         theta=a.theta, beta=a.beta)
            log.debug("Design spec: %s", spec.to_dict())
            taps = design_from_spec(spec)
            report(taps, a.isi, a.plot, log)
    except FilterDesignError as e:
        p.error(str(e))

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        logging.error("Fatal: %s", e)
        logging.debug("Traceback:", exc_info=True)
        sys.exit(1)
