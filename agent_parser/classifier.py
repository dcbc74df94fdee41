# agent_parser/classifier.py

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Sequence, Tuple, TypeVar, Union

from agent_parser.models import Browser, OperatingSystem, DeviceType
from agent_parser.schemas import ParsedAgent

logger = logging.getLogger(__name__)

Facet = TypeVar("Facet", bound=Enum)

# Tokens past this point are ignored, so the cost of a parse stays within a
# constant factor of a normal User-Agent however long the input is.
MAX_USER_AGENT_LENGTH = 1024

# Access logs write "-" for a missing header
EMPTY_VALUES = ("", "-")


@dataclass(frozen=True)
class Rule(Generic[Facet]):
    """
    A pattern and the variant it signals.

    The rule matches when `pattern` is found anywhere in the input and
    `unless` (if set) is not. Priority is the rule's position in its list.
    """
    pattern: re.Pattern
    variant: Facet
    unless: Optional[re.Pattern] = None

    def matches(self, text: str) -> bool:
        if self.pattern.search(text) is None:
            return False
        return self.unless is None or self.unless.search(text) is None


def rule(pattern: str, variant: Facet, ignore_case: bool = False, unless: Optional[str] = None) -> Rule[Facet]:
    flags = re.IGNORECASE if ignore_case else 0
    return Rule(
        pattern=re.compile(pattern, flags),
        variant=variant,
        unless=re.compile(unless, flags) if unless else None,
    )


# Patterns are literal alternations with bounded quantifiers only: no `.*`
# gaps and no nested repetition.
#
# Patterns matched in order - first match wins

BROWSER_RULES: Tuple[Rule[Browser], ...] = (
    # Crawlers often borrow a complete browser string
    rule(r"Googlebot|AdsBot-Google|Mediapartners-Google", Browser.GOOGLEBOT),
    rule(r"bingbot|BingPreview", Browser.BINGBOT, ignore_case=True),
    rule(r"Yahoo! Slurp", Browser.YAHOO),
    rule(r"Baiduspider", Browser.BAIDU, ignore_case=True),

    # In-app browsers wrap a stock WebKit or Chrome string
    rule(r"FBAN/|FBAV/|FB_IAB/|FBIOS", Browser.FACEBOOK),
    rule(r"Instagram", Browser.INSTAGRAM),
    rule(r"Snapchat", Browser.SNAPCHAT),
    rule(r"Twitter", Browser.TWITTER),

    # Chromium derivatives: all of them also send Chrome/ and Safari/
    rule(r"Edg(?:e|A|iOS)?/", Browser.EDGE),
    rule(r"OPR/|OPiOS/|OPT/|Opera", Browser.OPERA),
    rule(r"OculusBrowser/", Browser.OCULUS_BROWSER),  # also sends SamsungBrowser/
    rule(r"SamsungBrowser/", Browser.SAMSUNG_BROWSER),
    rule(r"UCBrowser|UCWEB|UBrowser/", Browser.UC_BROWSER),
    rule(r"YaBrowser/|YaSearchBrowser/", Browser.YANDEX),
    rule(r"Vivaldi/", Browser.VIVALDI),
    rule(r"\bBrave(?:/| Chrome/)", Browser.BRAVE),
    rule(r"\bSilk/", Browser.SILK),
    rule(r"DuckDuckGo/|\bDdg/", Browser.DUCKDUCKGO),
    rule(r"Puffin/", Browser.PUFFIN),
    rule(r"Maxthon|MxBrowser|\bMXiOS/", Browser.MAXTHON),
    rule(r"\bMercury/", Browser.MERCURY),
    rule(r"Dolphin|\bDolfin/", Browser.DOLPHIN),
    rule(r"Electron/", Browser.ELECTRON),
    rule(r"PhantomJS", Browser.PHANTOMJS),
    rule(r"TorBrowser/", Browser.TOR),

    # Android System WebView
    rule(r"; wv\)", Browser.WEBVIEW),

    rule(r"HeadlessChrome/|Chrome/|CriOS/|Chromium/", Browser.CHROME),
    rule(r"Firefox/|FxiOS/", Browser.FIREFOX),
    rule(r"MSIE |Trident/", Browser.INTERNET_EXPLORER),
    rule(r"Safari/", Browser.SAFARI),

    # iOS apps embedding WKWebView drop the Safari/ token
    rule(r"\((?:iPhone|iPad|iPod);[^)]{0,160}\) AppleWebKit/", Browser.WEBVIEW),
)

OS_RULES: Tuple[Rule[OperatingSystem], ...] = (
    # Platforms that also announce Windows, Android or iPhone
    rule(r"Xbox", OperatingSystem.XBOX),
    rule(r"Windows Phone|Windows Mobile|WPDesktop", OperatingSystem.WINDOWS_PHONE),
    rule(r"PlayStation", OperatingSystem.PLAYSTATION, ignore_case=True),
    rule(r"\bWii", OperatingSystem.WII),
    rule(r"Nintendo", OperatingSystem.NINTENDO),
    rule(r"HarmonyOS", OperatingSystem.HARMONY_OS, ignore_case=True),
    rule(r"KaiOS", OperatingSystem.KAIOS, ignore_case=True),
    rule(r"Tizen", OperatingSystem.TIZEN),
    rule(r"webOS|Web0S|hpwOS", OperatingSystem.WEBOS),
    rule(r"BlackBerry|BB10|RIM Tablet OS", OperatingSystem.BLACKBERRY),
    rule(r"Symbian|SymbOS|Series ?60", OperatingSystem.SYMBIAN),
    rule(r"\bBada\b", OperatingSystem.BADA, ignore_case=True),
    # Case matters: "cros" is part of "Microsoft"
    rule(r"CrOS|CrKey", OperatingSystem.CHROME_OS),
    rule(r"Android", OperatingSystem.ANDROID, ignore_case=True),

    # iPadOS starts at 13. Apple UAs all say "like Mac OS X"
    rule(r"iPad; CPU OS (?:1[3-9]|[2-9][0-9])_", OperatingSystem.IPADOS),
    rule(r"iPhone|iPad|iPod", OperatingSystem.IOS),
    rule(r"Mac OS X|Macintosh|macOS", OperatingSystem.MACOS),
    rule(r"Windows|Win(?:NT|9[58]|32|64)\b", OperatingSystem.WINDOWS),

    # Distributions before plain Linux
    rule(r"Ubuntu", OperatingSystem.UBUNTU, ignore_case=True),
    rule(r"Fedora", OperatingSystem.FEDORA, ignore_case=True),
    rule(r"Debian", OperatingSystem.DEBIAN, ignore_case=True),
    rule(r"FreeBSD", OperatingSystem.FREEBSD),
    rule(r"OpenBSD", OperatingSystem.OPENBSD),
    rule(r"SunOS|Solaris", OperatingSystem.SOLARIS),
    rule(r"\bAIX\b", OperatingSystem.AIX),
    rule(r"HP-UX", OperatingSystem.HPUX),
    rule(r"Linux", OperatingSystem.LINUX, ignore_case=True),
)

DEVICE_RULES: Tuple[Rule[DeviceType], ...] = (
    # Crawlers and scripted clients
    rule(
        r"Googlebot|AdsBot|bingbot|BingPreview|Slurp|Baiduspider|YandexBot|DuckDuckBot"
        r"|Applebot|facebookexternalhit|Twitterbot|AhrefsBot|SemrushBot",
        DeviceType.BOT,
        ignore_case=True,
    ),
    rule(r"\bbot\b|crawler|spider|scraper|monitoring", DeviceType.BOT, ignore_case=True),
    rule(r"^(?:curl|Wget|python-requests|python-urllib|Go-http-client|libwww-perl|Java)/", DeviceType.BOT, ignore_case=True),

    # Headsets, cars and watches run Android or Linux builds
    rule(r"Oculus|Quest|\bVive\b|HTC_VIVE|Pico Neo", DeviceType.VR_HEADSET),
    rule(r"Tesla|QtCarBrowser|Android Auto|CarPlay", DeviceType.CAR_SYSTEM),
    rule(r"\bWatch\b|Wear ?OS|Wearable", DeviceType.SMARTWATCH),

    rule(r"PlayStation", DeviceType.GAME, ignore_case=True),
    rule(r"Xbox|Nintendo|\bWii|\bPS[345]\b", DeviceType.GAME),

    # TVs and streaming sticks, whose Android builds omit Mobile
    rule(r"Smart-?TV|HbbTV|Google ?TV|Apple ?TV|NetCast|BRAVIA|Roku|Chromecast|Fire ?TV", DeviceType.TV, ignore_case=True),
    rule(r"\bTV\b|CrKey|Web0S|\bAFT[A-Z]{1,4}\b", DeviceType.TV),
    # Philips and other NetTV sets say DTV or glue the brand onto TV
    rule(r"\(DTV\)|PhilipsTV|NetTV", DeviceType.TV),

    # Tablets, one rule per vendor convention. iPads also send Mobile/
    rule(r"iPad", DeviceType.TABLET),
    rule(r"Kindle|\bSilk/|\bKF[A-Z]{2,6}\b", DeviceType.TABLET),
    rule(r"PlayBook|RIM Tablet", DeviceType.TABLET),
    rule(r"Tablet", DeviceType.TABLET, ignore_case=True, unless=r"Tablet PC"),
    rule(r"\bSM-[TPX][0-9]|\bGT-P[0-9]|\bGT-N[58][0-9]{3}", DeviceType.TABLET),
    rule(r"Nexus (?:7|9|10)\b", DeviceType.TABLET),
    # Android phones send Mobile, tablets do not
    rule(r"Android", DeviceType.TABLET, ignore_case=True, unless=r"Mobi|Opera Mini|Dalvik/"),

    rule(r"iPhone|iPod", DeviceType.MOBILE),
    rule(r"Windows Phone|IEMobile|Windows Mobile", DeviceType.MOBILE),
    rule(r"BlackBerry|BB10", DeviceType.MOBILE),
    rule(r"Symbian|SymbOS|Series ?[46]0|Nokia", DeviceType.MOBILE),
    rule(r"Opera Mini|KaiOS|\bBada\b|Dalvik/", DeviceType.MOBILE, ignore_case=True),
    rule(r"Mobi", DeviceType.MOBILE),
    rule(r"Android", DeviceType.MOBILE, ignore_case=True),

    # Desktop platforms go last so any more specific form factor wins
    rule(r"Windows|Macintosh|X11|x86_64|Linux|CrOS|FreeBSD|OpenBSD|SunOS|Ubuntu|Fedora|Debian", DeviceType.DESKTOP),
)


def match_first(rules: Sequence[Rule[Facet]], text: str, default: Facet) -> Facet:
    """Variant of the first matching rule, or `default` if none match"""
    for candidate in rules:
        if candidate.matches(text):
            return candidate.variant
    return default


def detect_browser(text: str) -> Browser:
    return match_first(BROWSER_RULES, text, Browser.UNKNOWN)


def detect_os(text: str) -> OperatingSystem:
    return match_first(OS_RULES, text, OperatingSystem.UNKNOWN)


def detect_device_type(text: str) -> DeviceType:
    return match_first(DEVICE_RULES, text, DeviceType.UNKNOWN)


def normalize_user_agent(user_agent: Union[str, bytes, None]) -> str:
    """
    Coerce raw header input to a bounded string.

    Bytes are decoded as latin-1, which maps every byte and cannot fail.
    """
    if user_agent is None:
        return ""
    if isinstance(user_agent, (bytes, bytearray)):
        user_agent = bytes(user_agent).decode("latin-1")
    elif not isinstance(user_agent, str):
        try:
            user_agent = str(user_agent)
        except Exception as e:
            logger.warning(f"Unprintable user agent of type {type(user_agent).__name__}: {type(e).__name__}")
            return ""

    user_agent = user_agent.strip()
    if len(user_agent) > MAX_USER_AGENT_LENGTH:
        logger.debug(f"Truncating user agent of {len(user_agent)} characters")
        user_agent = user_agent[:MAX_USER_AGENT_LENGTH]
    return user_agent


def parse(user_agent: Union[str, bytes, None]) -> ParsedAgent:
    """
    Classify a User-Agent string by browser, operating system and device type.

    Never raises. Facets with no matching rule are Unknown.
    """
    text = normalize_user_agent(user_agent)
    if text in EMPTY_VALUES:
        return ParsedAgent()

    return ParsedAgent(
        browser=detect_browser(text),
        os=detect_os(text),
        device_type=detect_device_type(text),
    )
