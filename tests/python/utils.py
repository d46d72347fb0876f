WEB_HEADER = (
    b"HTTP/1.1 200 OK\n"
    b"Date: Tue, 09 Dec 2003 21:21:33 GMT\n"
    b"Server: Apache/1.3.27 (Unix)\n"
    b"Last-Modified: Tue, 26 Mar 2002 19:24:25 GMT\n"
    b'ETag: "6361e-266-3ca0cae9\n'
    b"\n"
    b"Accept-Ranges: bytes\n"
    b"Content-Length: 614\n"
    b"Connection: close\n"
    b"Content-Type: text/html\n"
)

# a valid document, one with a misspelled <DOCHDR>, and one with stray `<` in the header
WEB_CORPUS = (
    b"<DOC>\n"
    b"<DOCNO>GX000-00-0000000</DOCNO>\n"
    b"<DOCHDR>\n"
    b"http://sgra.jpl.nasa.gov\n" + WEB_HEADER + b"</DOCHDR>\n"
    b"<html>"
    b"</DOC>\n        \t"
    b"<DOC>\n"
    b"<DOCNO>GX000-00-0000001</DOCNO>\n"
    b"<DCHDR>\n"
    b"http://sgra.jpl.nasa.gov\n" + WEB_HEADER + b"</DOCHDR>\n"
    b"<html> 2"
    b"</DOC>\n"
    b"<DOC>\n"
    b"<DOCNO>GX000-00-0000001</DOCNO>\n"
    b"<DOCHDR>\n"
    b"http://sgra.jpl.nasa.gov\n"
    b"HTTP/1.1 200 OK\n"
    b"<<<Date: Tue, 09 Dec 2003 21:21:33 GMT\n"
    b"Server: Apache/1.3.27 (Unix)\n"
    b"Content-Type: text/html\n"
    b"</DOCHDR>\n"
    b"<html> 2"
    b"</DOC>"
)

# two valid documents, one with </DOCN> instead of </DOCNO>, and one without content
TEXT_CORPUS = (
    b"<DOC>\n"
    b"<DOCNO> b2e89334-33f9-11e1-825f-dabc29fd7071 </DOCNO>\n"
    b"<URL> https://www.washingtonpost.com/stuff </URL>\n"
    b"<TITLE> title \n"
    b"</TITLE>\n"
    b"\n"
    b"\n"
    b"<HEADLINE>\n"
    b" headline \n"
    b"</HEADLINE>\n"
    b"<TEXT> 1 < 2 and other stuff... </TEXT>\n"
    b"</DOC>\n        \t"
    b"<DOC>\n"
    b"<DOCNO> b2e89334-33f9-11e1-825f-dabc29fd7072 </DOCNO>\n"
    b"<IGNORED attr=val>ignored text</IGNORED>\n"
    b"<TTL>not ignored text</TTL>\n"
    b"<TEXT>"
    b"<html> 2"
    b"</TEXT>"
    b"</DOC>\n"
    b"<DOC>\n"
    b"<DOCNO> b2e89334-33f9-11e1-825f-dabc29fd7073 </DOCN>\n"
    b"<TEXT>\n"
    b"<html> 2"
    b"</TEXT>\n"
    b"</DOC>\n"
    b"<DOC>\n"
    b"<DOCNO> b2e89334-33f9-11e1-825f-dabc29fd7071 </DOCNO>\n"
    b"</DOC>"
)


def make_web_doc(docno: str, url: str, body: bytes, header: bytes = WEB_HEADER) -> bytes:
    return (
        b"<DOC>\n<DOCNO>"
        + docno.encode("utf-8")
        + b"</DOCNO>\n<DOCHDR>\n"
        + url.encode("utf-8")
        + b"\n"
        + header
        + b"</DOCHDR>\n"
        + body
        + b"</DOC>\n"
    )
