"""paywire: stack detection and Razorpay checkout integration plans."""

__version__ = "0.1.0"
