# libsodium random source

import nacl.utils

randombytes = nacl.utils.random
