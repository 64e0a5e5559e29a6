"""Paint composer: HSVA colour editing, gradient stops and layered paints as CSS.

Usage
-----
$ pip install -e .
$ python main.py                 # starts on http://127.0.0.1:5000

Configuration comes from PAINT_COMPOSER_* environment variables, e.g.
PAINT_COMPOSER_DEFAULT_COLOR='"#336699"'. Values are parsed as JSON when they
parse, so lists work too: PAINT_COMPOSER_SWATCHES='["#ff0000", "#00ff00"]'.
"""

from paint_composer.app import create_app

if __name__ == "__main__":
    # one editing session per process; requests must not interleave
    create_app().run(debug=False, threaded=False)
