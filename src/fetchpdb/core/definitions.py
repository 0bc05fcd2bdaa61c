"""Static definitions that serve the whole program infrastructure."""
from collections import namedtuple
from types import MappingProxyType


FormatSpec = namedtuple(
    'FormatSpec',
    [
        'name',
        'folder',
        'remote_ext',
        'prefix',
        'local_ext',
        ],
    )

MirrorEndpoint = namedtuple(
    'MirrorEndpoint',
    [
        'region',
        'host',
        'port',
        'path',
        ],
    )

FTP_PORT = 21
CONNECTION_TIMEOUT = 5
ANONYMOUS = 'anonymous'
FILE_PERMISSIONS = 0o644

DEFAULT_FORMAT = 'pdb'
DEFAULT_REGION = 'us'


# file formats served by the wwPDB archive
formats = MappingProxyType({
    'pdb': FormatSpec(
        name='pdb',
        folder='pdb/data/structures/divided/pdb/',
        remote_ext='.ent.gz',
        prefix='pdb',
        local_ext='.pdb',
        ),
    'cif': FormatSpec(
        name='cif',
        folder='pdb/data/structures/divided/mmCIF/',
        remote_ext='.cif.gz',
        prefix='',
        local_ext='.cif',
        ),
    })


# regional wwPDB FTP mirrors
mirrors = MappingProxyType({
    'us': MirrorEndpoint(
        region='us',
        host='ftp.wwpdb.org',
        port=FTP_PORT,
        path='/pub/',
        ),
    'eu': MirrorEndpoint(
        region='eu',
        host='ftp.ebi.ac.uk',
        port=FTP_PORT,
        path='/pub/databases/rcsb/',
        ),
    'jp': MirrorEndpoint(
        region='jp',
        host='ftp.pdbj.org',
        port=FTP_PORT,
        path='/pub/',
        ),
    })
