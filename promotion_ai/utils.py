import logging
import sys
from typing import List

def setup_logging(name: str = "promotion_ai", level: int = logging.INFO) -> logging.Logger:
    """Configure and return a logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Avoid adding multiple handlers if setup is called multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        
    return logger

def split_csv(value: str) -> List[str]:
    """Split a comma-separated setting into lowercase, non-empty names."""
    return [part.strip().lower() for part in value.split(",") if part.strip()]
