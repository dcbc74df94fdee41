# agent_parser/models.py

from enum import Enum


class Browser(str, Enum):
    """Browser or client family"""

    CHROME = "Chrome"
    SAFARI = "Safari"
    FIREFOX = "Firefox"
    EDGE = "Edge"
    INTERNET_EXPLORER = "InternetExplorer"
    OPERA = "Opera"
    DOLPHIN = "Dolphin"
    BRAVE = "Brave"
    PUFFIN = "Puffin"
    MAXTHON = "Maxthon"
    MERCURY = "Mercury"
    SILK = "Silk"
    VIVALDI = "Vivaldi"
    YANDEX = "Yandex"
    DUCKDUCKGO = "DuckDuckGo"
    TOR = "Tor"
    ELECTRON = "Electron"
    PHANTOMJS = "PhantomJS"
    WEBVIEW = "WebView"
    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    TWITTER = "Twitter"
    SNAPCHAT = "Snapchat"
    GOOGLEBOT = "Googlebot"
    BINGBOT = "Bingbot"
    YAHOO = "Yahoo"
    BAIDU = "Baidu"
    UC_BROWSER = "UCBrowser"
    SAMSUNG_BROWSER = "SamsungBrowser"
    OCULUS_BROWSER = "OculusBrowser"
    UNKNOWN = "Unknown"


class OperatingSystem(str, Enum):
    """Operating system family"""

    WINDOWS = "Windows"
    WINDOWS_PHONE = "WindowsPhone"
    MACOS = "MacOS"
    IOS = "IOS"
    IPADOS = "IPadOS"
    ANDROID = "Android"
    LINUX = "Linux"
    UBUNTU = "Ubuntu"
    FEDORA = "Fedora"
    DEBIAN = "Debian"
    CHROME_OS = "ChromeOS"
    BLACKBERRY = "BlackBerry"
    SYMBIAN = "Symbian"
    WEBOS = "WebOS"
    BADA = "Bada"
    TIZEN = "Tizen"
    NINTENDO = "Nintendo"
    PLAYSTATION = "PlayStation"
    XBOX = "Xbox"
    WII = "Wii"
    FREEBSD = "FreeBSD"
    OPENBSD = "OpenBSD"
    SOLARIS = "Solaris"
    AIX = "AIX"
    HPUX = "HPUX"
    HARMONY_OS = "HarmonyOS"
    KAIOS = "KaiOS"
    UNKNOWN = "Unknown"


class DeviceType(str, Enum):
    """Hardware form factor"""

    MOBILE = "Mobile"
    TABLET = "Tablet"
    DESKTOP = "Desktop"
    GAME = "Game"
    TV = "TV"
    SMARTWATCH = "Smartwatch"
    VR_HEADSET = "VRHeadset"
    CAR_SYSTEM = "CarSystem"
    BOT = "Bot"
    UNKNOWN = "Unknown"
