# primegen/config.py
import os


class Config:
    GENERATION_LIMIT_PARAM = "generationLimit"
    SUCCESS_MESSAGE = "primes generated!"
    # DEBUG, INFO, WARNING, ERROR ou CRITICAL; valor desconhecido vira INFO
    LOG_LEVEL = os.getenv("PRIMES_LOG_LEVEL", "INFO")
