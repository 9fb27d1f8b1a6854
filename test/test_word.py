
import base64
import logging
import unittest

from encword.exceptions import InvalidArgument, EncodedWordTooLong
from encword.word import Encoding, Usage, select_encoding, encode_b, \
    encode_q, b_encoded_length, q_encoded_length, word_prefix, build_word


class TestEnums(unittest.TestCase):

    def test_encoding_of(self) -> None:
        self.assertEqual(Encoding.B, Encoding.of(Encoding.B))
        self.assertEqual(Encoding.B, Encoding.of('b'))
        self.assertEqual(Encoding.Q, Encoding.of('Q'))
        with self.assertRaises(InvalidArgument):
            Encoding.of('x')

    def test_usage_of(self) -> None:
        self.assertEqual(Usage.TEXT_TOKEN, Usage.of(Usage.TEXT_TOKEN))
        self.assertEqual(Usage.TEXT_TOKEN, Usage.of('text'))
        self.assertEqual(Usage.WORD_ENTITY, Usage.of('word'))
        self.assertEqual(Usage.WORD_ENTITY, Usage.of('word_entity'))
        with self.assertRaises(InvalidArgument):
            Usage.of('bogus')


class TestSelectEncoding(unittest.TestCase):

    def test_empty(self) -> None:
        self.assertEqual(Encoding.Q, select_encoding(b'', Usage.TEXT_TOKEN))
        self.assertEqual(Encoding.Q, select_encoding(b'', Usage.WORD_ENTITY))

    def test_percentage(self) -> None:
        self.assertEqual(Encoding.Q,
                         select_encoding(b'hello', Usage.TEXT_TOKEN))
        self.assertEqual(Encoding.Q,
                         select_encoding(b'\xe9' * 3 + b'a' * 7,
                                         Usage.TEXT_TOKEN))
        self.assertEqual(Encoding.B,
                         select_encoding(b'\xe9' * 31 + b'a' * 69,
                                         Usage.TEXT_TOKEN))
        self.assertEqual(Encoding.Q,
                         select_encoding(b'\xe9' * 30 + b'a' * 71,
                                         Usage.TEXT_TOKEN))

    def test_usage(self) -> None:
        self.assertEqual(Encoding.Q, select_encoding(b'(a)', Usage.TEXT_TOKEN))
        self.assertEqual(Encoding.B,
                         select_encoding(b'(a)', Usage.WORD_ENTITY))


class TestEncodeB(unittest.TestCase):

    def test_encode_b(self) -> None:
        self.assertEqual('', encode_b(b''))
        self.assertEqual('AAEC', encode_b(b'\x00\x01\x02'))
        self.assertEqual('/w==', encode_b(b'\xff'))
        self.assertEqual('//4=', encode_b(b'\xff\xfe'))

    def test_encode_b_base64(self) -> None:
        data = bytes(range(256))
        for end in range(10):
            encoded = encode_b(data[250 - end:250])
            self.assertEqual(base64.b64encode(data[250 - end:250]),
                             encoded.encode('ascii'))
            self.assertEqual((end + 2) // 3 * 4, len(encoded))
            self.assertEqual(len(encoded),
                             b_encoded_length(data[250 - end:250]))


class TestEncodeQ(unittest.TestCase):

    def test_encode_q(self) -> None:
        self.assertEqual('', encode_q(b'', Usage.TEXT_TOKEN))
        self.assertEqual('a_b', encode_q(b'a b', Usage.TEXT_TOKEN))
        self.assertEqual('=3D=3F=5F', encode_q(b'=?_', Usage.TEXT_TOKEN))
        self.assertEqual('=E9=00=09=7F',
                         encode_q(b'\xe9\x00\t\x7f', Usage.TEXT_TOKEN))

    def test_encode_q_usage(self) -> None:
        self.assertEqual('"(x)"', encode_q(b'"(x)"', Usage.TEXT_TOKEN))
        self.assertEqual('=22=28x=29=22',
                         encode_q(b'"(x)"', Usage.WORD_ENTITY))
        self.assertEqual('a=2Eb=40c', encode_q(b'a.b@c', Usage.WORD_ENTITY))

    def test_encode_q_escapes_superset(self) -> None:
        for byte in range(256):
            text_token = encode_q(bytes([byte]), Usage.TEXT_TOKEN)
            word_entity = encode_q(bytes([byte]), Usage.WORD_ENTITY)
            if text_token.startswith('='):
                self.assertEqual(text_token, word_entity)

    def test_q_encoded_length(self) -> None:
        data = bytes(range(256))
        for usage in Usage:
            self.assertEqual(len(encode_q(data, usage)),
                             q_encoded_length(data, usage))


class TestBuildWord(unittest.TestCase):

    def test_word_prefix(self) -> None:
        self.assertEqual('=?UTF-8?B?', word_prefix('UTF-8', Encoding.B))
        self.assertEqual('=?US-ASCII?Q?', word_prefix('US-ASCII', Encoding.Q))

    def test_build_word(self) -> None:
        prefix = word_prefix('US-ASCII', Encoding.Q)
        self.assertEqual('=?US-ASCII?Q?a_b?=',
                         build_word(prefix, 'a b', Encoding.Q,
                                    Usage.TEXT_TOKEN, 0, 'us-ascii', b'a b'))

    def test_build_word_requires_usage(self) -> None:
        prefix = word_prefix('US-ASCII', Encoding.Q)
        with self.assertRaises(InvalidArgument):
            build_word(prefix, 'a', Encoding.Q, None, 0, 'us-ascii', b'a')
        prefix = word_prefix('US-ASCII', Encoding.B)
        self.assertEqual('=?US-ASCII?B?YQ==?=',
                         build_word(prefix, 'a', Encoding.B, None, 0,
                                    'us-ascii', b'a'))

    def test_build_word_split(self) -> None:
        prefix = word_prefix('ISO-8859-1', Encoding.Q)
        text = 'a' * 70 + '\xe9'
        data = text.encode('iso-8859-1')
        self.assertEqual('=?ISO-8859-1?Q?' + 'a' * 35 + '?= '
                         '=?ISO-8859-1?Q?' + 'a' * 35 + '=E9?=',
                         build_word(prefix, text, Encoding.Q,
                                    Usage.TEXT_TOKEN, 0, 'iso-8859-1', data))

    def test_build_word_split_used_characters(self) -> None:
        prefix = word_prefix('ISO-8859-1', Encoding.B)
        text = '\xe9' * 50
        data = text.encode('iso-8859-1')
        ret = build_word(prefix, text, Encoding.B, None, 30, 'iso-8859-1',
                         data)
        words = ret.split(' ')
        self.assertEqual(3, len(words))
        self.assertLessEqual(len(words[0]), 45)
        for word in words:
            self.assertLessEqual(len(word), 75)
        bodies = [base64.b64decode(word[15:-2]) for word in words]
        self.assertEqual(data, b''.join(bodies))

    def test_build_word_split_logged(self) -> None:
        prefix = word_prefix('US-ASCII', Encoding.Q)
        text = 'a' * 100
        with self.assertLogs('encword.word', logging.DEBUG) as logs:
            build_word(prefix, text, Encoding.Q, Usage.TEXT_TOKEN, 0,
                       'us-ascii', text.encode('ascii'))
        self.assertIn('Splitting 100 characters', logs.output[0])

    def test_build_word_empty(self) -> None:
        prefix = '=?' + 'X' * 80 + '?Q?'
        self.assertEqual(prefix + '?=',
                         build_word(prefix, '', Encoding.Q, Usage.TEXT_TOKEN,
                                    50, 'us-ascii', b''))

    def test_build_word_single_character(self) -> None:
        prefix = '=?' + 'X' * 50 + '?Q?'
        self.assertEqual(prefix + '?= ' + prefix + 'a?=',
                         build_word(prefix, 'a', Encoding.Q, Usage.TEXT_TOKEN,
                                    20, 'us-ascii', b'a'))

    def test_build_word_too_long(self) -> None:
        prefix = '=?' + 'X' * 70 + '?Q?'
        with self.assertRaises(EncodedWordTooLong) as raised:
            build_word(prefix, 'ab', Encoding.Q, Usage.TEXT_TOKEN, 0,
                       'us-ascii', b'ab')
        self.assertEqual('a', raised.exception.text)
        self.assertEqual(78, raised.exception.length)
