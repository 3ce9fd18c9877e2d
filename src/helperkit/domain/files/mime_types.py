"""Extension and MIME type table.

Each entry pairs a list of extensions (without the leading dot) with a list
of MIME types; the first item of each list is the preferred one. Lookups
scan the entries in order, so the first matching entry wins.
"""

FormatEntry = tuple[list[str], list[str]]

IMAGE_TYPES: list[FormatEntry] = [
    (["jpg", "jpeg", "jpe"], ["image/jpeg"]),
    (["png"], ["image/png"]),
    (["gif"], ["image/gif"]),
    (["svg"], ["image/svg+xml"]),
    (["bmp"], ["image/bmp"]),
    (["webp"], ["image/webp"]),
    (["tiff", "tif"], ["image/tiff"]),
]

AUDIO_TYPES: list[FormatEntry] = [
    (["mp3", "mpga", "mp2", "mp2a", "m2a", "m3a"], ["audio/mpeg"]),
    (["wav"], ["audio/x-wav"]),
    (["ogg", "oga", "spx"], ["audio/ogg"]),
    (["aac"], ["audio/x-aac", "audio/aac"]),
    (["aif", "aiff", "aifc"], ["audio/x-aiff"]),
    (["wma"], ["audio/x-ms-wma"]),
    (["weba"], ["audio/webm"]),
]

VIDEO_TYPES: list[FormatEntry] = [
    (["mp4", "mp4v", "mpg4"], ["video/mp4"]),
    (["mpeg", "mpg", "mpe", "m1v", "m2v"], ["video/mpeg"]),
    (["avi"], ["video/x-msvideo"]),
    (["wmv"], ["video/x-ms-wmv"]),
    (["flv"], ["video/x-flv"]),
    (["mov", "qt"], ["video/quicktime"]),
    (["webm"], ["video/webm"]),
]

OTHER_TYPES: list[FormatEntry] = [
    (["xl"], ["application/excel"]),
    (["js"], ["application/javascript"]),
    (["hqx"], ["application/mac-binhex40"]),
    (["cpt"], ["application/mac-compactpro"]),
    (["bin"], ["application/macbinary"]),
    (["doc", "word"], ["application/msword"]),
    (["xlsx"], ["application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"]),
    (["xltx"], ["application/vnd.openxmlformats-officedocument.spreadsheetml.template"]),
    (["potx"], ["application/vnd.openxmlformats-officedocument.presentationml.template"]),
    (["ppsx"], ["application/vnd.openxmlformats-officedocument.presentationml.slideshow"]),
    (["pptx"], ["application/vnd.openxmlformats-officedocument.presentationml.presentation"]),
    (["sldx"], ["application/vnd.openxmlformats-officedocument.presentationml.slide"]),
    (["docx"], ["application/vnd.openxmlformats-officedocument.wordprocessingml.document"]),
    (["dotx"], ["application/vnd.openxmlformats-officedocument.wordprocessingml.template"]),
    (["xlam"], ["application/vnd.ms-excel.addin.macroEnabled.12"]),
    (["xlsb"], ["application/vnd.ms-excel.sheet.binary.macroEnabled.12"]),
    (["eot"], ["application/vnd.ms-fontobject"]),
    (["exe", "class", "dll", "dms", "lha", "lzh", "psd", "sea", "so"], ["application/octet-stream"]),
    (["oda"], ["application/oda"]),
    (["pdf"], ["application/pdf"]),
    (["ai", "eps", "ps"], ["application/postscript"]),
    (["smi", "smil"], ["application/smil"]),
    (["mif"], ["application/vnd.mif"]),
    (["xls"], ["application/vnd.ms-excel"]),
    (["ppt"], ["application/vnd.ms-powerpoint"]),
    (["wbxml"], ["application/vnd.wap.wbxml"]),
    (["wmlc"], ["application/vnd.wap.wmlc"]),
    (["dcr", "dir", "dxr"], ["application/x-director"]),
    (["dvi"], ["application/x-dvi"]),
    (["gtar"], ["application/x-gtar"]),
    (["php", "php3", "php4", "phtml"], ["application/x-httpd-php"]),
    (["phps"], ["application/x-httpd-php-source"]),
    (["swf"], ["application/x-shockwave-flash"]),
    (["sit"], ["application/x-stuffit"]),
    (["tar", "tgz"], ["application/x-tar"]),
    (["xhtml", "xht"], ["application/xhtml+xml"]),
    (["zip"], ["application/zip", "application/x-zip-compressed"]),
    (["bz"], ["application/x-bzip"]),
    (["bz2"], ["application/x-bzip2"]),
    (["gz"], ["application/gzip"]),
    (["mid", "midi"], ["audio/midi"]),
    (["ram", "rm"], ["audio/x-pn-realaudio"]),
    (["rpm"], ["audio/x-pn-realaudio-plugin"]),
    (["ra"], ["audio/x-realaudio"]),
    (["eml"], ["message/rfc822"]),
    (["css"], ["text/css"]),
    (["html", "htm", "shtml"], ["text/html"]),
    (["txt", "text", "log"], ["text/plain"]),
    (["rtx"], ["text/richtext"]),
    (["rtf"], ["text/rtf", "application/rtf"]),
    (["vcf", "vcard"], ["text/vcard", "text/x-vcard"]),
    (["xml", "xsl"], ["text/xml"]),
    (["csh"], ["application/x-csh"]),
    (["csv"], ["text/csv"]),
    (["ico"], ["image/x-icon"]),
    (["ics"], ["text/calendar"]),
    (["jar"], ["application/java-archive"]),
    (["json"], ["application/json"]),
    (["mpkg"], ["application/vnd.apple.installer+xml"]),
    (["odp"], ["application/vnd.oasis.opendocument.presentation"]),
    (["ods"], ["application/vnd.oasis.opendocument.spreadsheet"]),
    (["odt"], ["application/vnd.oasis.opendocument.text"]),
    (["ogx"], ["application/ogg"]),
    (["otf"], ["font/otf"]),
    (["ttf"], ["font/ttf"]),
    (["woff"], ["font/woff"]),
    (["woff2"], ["font/woff2"]),
    (["rar"], ["application/x-rar-compressed"]),
    (["sh"], ["application/x-sh"]),
    (["ts"], ["application/typescript"]),
    (["vsd"], ["application/vnd.visio"]),
    (["xul"], ["application/vnd.mozilla.xul+xml"]),
    (["3gp"], ["video/3gpp", "audio/3gpp"]),
    (["3g2"], ["video/3gpp2", "audio/3gpp2"]),
    (["7z"], ["application/x-7z-compressed"]),
    (["azw"], ["application/vnd.amazon.ebook"]),
    (["rv"], ["video/vnd.rn-realvideo"]),
    (["movie"], ["video/x-sgi-movie"]),
]

EXTENSIONS_AND_MIME_TYPES: list[FormatEntry] = (
    IMAGE_TYPES + AUDIO_TYPES + VIDEO_TYPES + OTHER_TYPES
)

# Magic bytes of well-known formats, checked in order. A signature is a set
# of (offset, bytes) parts that must all match; ISO media boxes ("ftyp...")
# follow a 4-byte box size, RIFF containers carry their form type at 8.
Signature = tuple[tuple[int, bytes], ...]

FILE_SIGNATURES: list[tuple[list[Signature], str]] = [
    ([((4, b"ftyp3g"),)], "video/3gpp"),
    ([((0, b"BM"),)], "image/bmp"),
    ([((0, b"MZ"),)], "application/octet-stream"),
    ([((0, b"GIF87a"),), ((0, b"GIF89a"),)], "image/gif"),
    ([((0, b"\xff\xd8\xff"),)], "image/jpeg"),
    ([((4, b"ftypisom"),), ((4, b"ftypMSNV"),)], "video/mp4"),
    ([((0, b"%PDF-"),)], "application/pdf"),
    ([((0, b"\x89PNG\r\n\x1a\n"),)], "image/png"),
    ([((4, b"ftypqt  "),)], "video/quicktime"),
    ([((0, b"{\\rtf1"),)], "application/rtf"),
    ([((0, b"II*\x00"),), ((0, b"MM\x00*"),)], "image/tiff"),
    ([((0, b"RIFF"), (8, b"WEBP"))], "image/webp"),
    ([((0, b"RIFF"), (8, b"WAVE"))], "audio/x-wav"),
    ([((0, b"RIFF"), (8, b"AVI "))], "video/x-msvideo"),
    ([((0, b"PK\x03\x04"),)], "application/zip"),
]
