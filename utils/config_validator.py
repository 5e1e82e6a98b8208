import math


def validate_config(config: dict):
    required_keys = [
        "INITIAL_BALANCE",
        "RISK_FREE_RATE",
    ]

    missing = [k for k in required_keys if config.get(k) is None]
    if missing:
        raise ValueError(f"Missing required configuration keys: {missing}")

    for key in ("INITIAL_BALANCE", "RISK_FREE_RATE"):
        if isinstance(config[key], bool) or not isinstance(config[key], (int, float)):
            raise TypeError(f"{key} must be a number.")
        if not math.isfinite(config[key]):
            raise ValueError(f"{key} must be finite, got {config[key]}")

    # drawdown percentages divide by the running peak, which starts here
    if config["INITIAL_BALANCE"] <= 0:
        raise ValueError(f"INITIAL_BALANCE must be positive, got {config['INITIAL_BALANCE']}")

    sample_size = config.get("SAMPLE_SIZE")
    if sample_size is not None:
        if isinstance(sample_size, bool) or not isinstance(sample_size, int):
            raise TypeError("SAMPLE_SIZE must be an integer.")
        if sample_size < 0:
            raise ValueError("SAMPLE_SIZE must not be negative.")

    csv_path = config.get("TRADES_CSV")
    if csv_path is not None and not isinstance(csv_path, str):
        raise TypeError("TRADES_CSV must be a path string.")
