# gunicorn -c gunicorn_conf.py run:app
import multiprocessing
import os

# o crivo é CPU-bound: paralelismo vem de processos, não de threads
workers = int(os.getenv("GUNICORN_WORKERS", max(1, multiprocessing.cpu_count())))
threads = int(os.getenv("GUNICORN_THREADS", 1))

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8080")

# limites perto de 2147483647 levam dezenas de segundos
timeout = int(os.getenv("GUNICORN_TIMEOUT", 120))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", 2))

accesslog = "-"   # stdout
errorlog = "-"    # stderr
loglevel = os.getenv("GUNICORN_LOGLEVEL", "info")
