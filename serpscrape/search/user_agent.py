import random

def random_user_agent() -> str:
    """
    Builds a text-browser style User-Agent from randomized version numbers.
    Google answers such clients with the basic HTML result page, which is the
    markup the extractor layouts know about.
    """
    lynx = f"Lynx/{random.randint(2, 3)}.{random.randint(8, 9)}.{random.randint(0, 2)}"
    libwww = f"libwww-FM/{random.randint(2, 3)}.{random.randint(13, 15)}"
    ssl_mm = f"SSL-MM/1.{random.randint(3, 5)}"
    openssl = f"OpenSSL/{random.randint(1, 3)}.{random.randint(0, 4)}.{random.randint(0, 9)}"
    return f"{lynx} {libwww} {ssl_mm} {openssl}"
