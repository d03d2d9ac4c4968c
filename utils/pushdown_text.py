import argparse
import logging
import sys

from hangul_pushdown.domain.hangul_compose import decompose_to_jamo
from hangul_pushdown.domain.hangul_unicode import is_hangul_syllable
from hangul_pushdown.services.pushdown_service import PushdownService
from hangul_pushdown.services.settings_store import SettingsStore


def _print_jamo(text, out):
    for ch in text:
        if not is_hangul_syllable(ch):
            continue
        cho, jung, jong = decompose_to_jamo(ch)
        print("{}\t{} {} {}".format(ch, cho, jung, jong or "-"), file=out)


def main(argv=None, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = argparse.ArgumentParser(description="Apply Hangul jongseong pushdown (liaison) to text.")
    parser.add_argument("text", nargs="*", help="Text to transform (reads stdin if omitted).")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--extended", dest="extended", action="store_true", default=None,
                      help="Also apply the phonetically loose rules.")
    mode.add_argument("--conservative", dest="extended", action="store_false", default=None,
                      help="Only apply phonetically equivalent rules.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("--save-default", action="store_true",
                        help="Persist the chosen mode as the default.")
    parser.add_argument("--decompose", action="store_true",
                        help="Print the jamo of each syllable instead of transforming.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.save_default and args.extended is None:
        parser.error("--save-default needs --extended or --conservative")

    store = SettingsStore(args.settings)
    if args.save_default:
        store.set_extended(args.extended)

    text = " ".join(args.text) if args.text else stdin.read()

    if args.decompose:
        _print_jamo(text, stdout)
        return 0

    service = PushdownService(store)
    result = service.pushdown(text, args.extended)
    stdout.write(result)
    if args.text:
        stdout.write("\n")
    return 0


if __name__ == "__main__":
    # Usage:
    #   python3 utils/pushdown_text.py 국어                  -> 구거
    #   python3 utils/pushdown_text.py --extended 좋아       -> 조하
    #   echo 닭이 | python3 utils/pushdown_text.py
    #   python3 utils/pushdown_text.py --decompose 닭
    sys.exit(main())
