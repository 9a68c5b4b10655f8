"""
PlatformIO Build Hook
빌드 전 웹사이트 디렉토리를 website.h / website.cpp(.c)로 변환

platformio.ini:
    extra_scripts = pre:scripts/platformio_hook.py
    custom_website_source = data/www
    custom_website_target = lib/website
    custom_website_framework = arduino
    custom_website_author = Your Name

컴파일할 소스 목록이 정해지기 전에 파일이 있어야 하므로 스크립트 로드 시점에 바로 실행
"""

Import("env")

import logging

from webpage_to_c.build_hook import embed_website

logging.basicConfig(level=logging.INFO, format='[webpage-to-c] %(message)s')

embed_website(env)
